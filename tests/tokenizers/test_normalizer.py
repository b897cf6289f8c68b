from ulm.tokenizers.normalizer import normalize_text, pre_tokenize


def test_normalize_whitespace_and_control_chars() -> None:
    raw = "Hello\u00A0World\r\nTab\tControl\x07"
    normalized = normalize_text(raw)
    assert normalized == "Hello World\nTab\tControl"


def test_normalize_nfkc() -> None:
    assert normalize_text("ｆｕｌｌ　width") == "full width"


def test_pre_tokenize_keeps_leading_whitespace() -> None:
    assert pre_tokenize("hello  world ") == [
        ("hello", (0, 5)),
        ("  world", (5, 12)),
        (" ", (12, 13)),
    ]


def test_pre_tokenize_is_lossless() -> None:
    text = " leading\tand\ntrailing  "
    words = pre_tokenize(text)
    assert "".join(word for word, _ in words) == text
    for word, (start, end) in words:
        assert text[start:end] == word
    assert pre_tokenize("") == []
