from ulm.tokenizers import TrieBuilder


def build(*tokens: str):
    return TrieBuilder().extend(tokens).build()


def test_common_prefix_search_shortest_first() -> None:
    trie = build("abc", "a", "b", "ab")
    assert trie.common_prefix_search("abcd") == ["a", "ab", "abc"]
    assert trie.common_prefix_search("bcd") == ["b"]
    assert trie.common_prefix_search("xyz") == []
    assert trie.common_prefix_search("") == []


def test_common_prefix_search_lengths_non_decreasing() -> None:
    trie = build("t", "th", "the", "then", "there", "h", "he")
    for text in ["there", "then", "thus", "hello"]:
        lengths = [len(match) for match in trie.common_prefix_search(text)]
        assert lengths == sorted(lengths)


def test_matches_on_characters_not_bytes() -> None:
    trie = build("東", "東京", "京都")
    assert trie.common_prefix_search("東京都") == ["東", "東京"]
    assert trie.common_prefix_search(list("東京都"), 1) == ["京都"]


def test_size_and_membership() -> None:
    trie = build("a", "ab", "ab")
    assert len(trie) == 2
    assert "ab" in trie
    assert "b" not in trie
    assert 3 not in trie


def test_search_does_not_mutate() -> None:
    trie = build("a", "ab")
    first = trie.common_prefix_search("abab")
    second = trie.common_prefix_search("abab")
    assert first == second == ["a", "ab"]
    assert len(trie) == 2


def test_search_from_offset() -> None:
    trie = build("a", "ab", "b", "bc")
    chars = list("xabc")
    assert trie.common_prefix_search(chars, 1) == ["a", "ab"]
    assert trie.common_prefix_search(chars, 2) == ["b", "bc"]
    assert trie.common_prefix_search(chars, 0) == []
    assert trie.common_prefix_search(chars, 4) == []
