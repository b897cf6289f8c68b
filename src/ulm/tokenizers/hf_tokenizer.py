"""Bridge to Hugging Face tokenizers for cross-checking and deployment."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .unigram import Unigram

if TYPE_CHECKING:  # pragma: no cover
    from tokenizers import Tokenizer as HFTokenizerImpl


def to_hf_tokenizer(model: Unigram) -> HFTokenizerImpl:
    """Build a ``tokenizers.Tokenizer`` holding the same pieces and scores."""

    try:
        from tokenizers import Tokenizer, models
    except ModuleNotFoundError as exc:  # pragma: no cover
        raise RuntimeError(
            "Missing dependency: install `tokenizers` (pip install tokenizers) "
            "or reinstall with `pip install -e '.[hf]'`."
        ) from exc

    return Tokenizer(models.Unigram(list(model.iter()), model.unk_id))


def hf_encode(model: Unigram, text: str) -> list[str]:
    """Segment ``text`` with the Hugging Face implementation of ``model``."""

    return list(to_hf_tokenizer(model).encode(text).tokens)
