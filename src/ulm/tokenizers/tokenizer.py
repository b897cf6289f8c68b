"""Tokenizer pipeline built around a unigram model."""

from __future__ import annotations

from pathlib import Path

from .base import LoadError, Model, Token
from .normalizer import normalize_text, pre_tokenize
from .unigram import Unigram


class Tokenizer:
    def __init__(self, model: Model, *, normalize: bool = True, fuse_unk: bool = False) -> None:
        self.model = model
        self.normalize = normalize
        self.fuse_unk = fuse_unk

    @property
    def vocab_size(self) -> int:
        return self.model.get_vocab_size()

    def encode_tokens(self, text: str) -> list[Token]:
        if self.normalize:
            text = normalize_text(text)
        return self.model.tokenize(pre_tokenize(text), fuse_unk=self.fuse_unk)

    def encode(self, text: str) -> list[int]:
        return [token.id for token in self.encode_tokens(text)]

    def decode(self, ids: list[int]) -> str:
        parts: list[str] = []
        for idx in ids:
            token = self.model.id_to_token(idx)
            if token is not None:
                parts.append(token)
        return "".join(parts)

    @classmethod
    def from_file(cls, path: Path, *, normalize: bool = True, fuse_unk: bool = False) -> Tokenizer:
        return cls(load_model(path), normalize=normalize, fuse_unk=fuse_unk)


def load_model(path: Path, kind: str = "auto") -> Unigram:
    """Load a unigram model from a saved model, a JSON vocabulary or a TSV export."""

    path = Path(path)
    if kind == "auto":
        kind = detect_kind(path)
    if kind == "model":
        return Unigram.from_file(path)
    if kind == "json":
        return Unigram.load(path)
    if kind == "spm":
        return Unigram.load_spm(path)
    raise ValueError(f"unknown vocabulary format: {kind}")


def detect_kind(path: Path) -> str:
    """Guess the format of ``path``: ``model``, ``json`` or ``spm``."""

    path = Path(path)
    if path.suffix != ".json":
        return "spm"
    try:
        with path.open("r", encoding="utf-8") as handle:
            head = handle.read(1024).lstrip()
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"cannot read vocabulary {path}: {exc}") from exc
    if head.startswith("{"):
        return "model"
    return "json"
