"""Dataclass and loader for tokenizer configuration."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import yaml

from ulm.tokenizers.tokenizer import Tokenizer, load_model
from ulm.tokenizers.unigram import Unigram

FORMATS = ("auto", "model", "json", "spm")


@dataclass
class TokenizerConfig:
    vocab: str
    format: str = "auto"
    fuse_unk: bool = False
    normalize: bool = True
    bos_id: Optional[int] = None
    eos_id: Optional[int] = None
    unk_id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.format not in FORMATS:
            raise ValueError(f"format must be one of {FORMATS}, got {self.format!r}")

    def load_model(self) -> Unigram:
        """Load the vocabulary, then apply any boundary id overrides.

        Overrides replace the ids the format implies, whichever format was
        detected, including the ids stored in a saved model.
        """

        model = load_model(Path(self.vocab), self.format)
        overrides = (self.bos_id, self.eos_id, self.unk_id)
        if all(value is None for value in overrides):
            return model
        current = (model.bos_id, model.eos_id, model.unk_id)
        bos_id, eos_id, unk_id = (
            old if value is None else value for value, old in zip(overrides, current)
        )
        return Unigram(list(model.iter()), bos_id, eos_id, unk_id)

    def build_tokenizer(self) -> Tokenizer:
        return Tokenizer(self.load_model(), normalize=self.normalize, fuse_unk=self.fuse_unk)


def _expand_path(value: str) -> str:
    if value.startswith("${") and value.endswith("}"):
        body = value[2:-1]
        if ":-" in body:
            var, default = body.split(":-", 1)
            return os.environ.get(var, default)
        return os.environ.get(body, "")
    return os.path.expanduser(os.path.expandvars(value))


def load_tokenizer_config(path: Path) -> TokenizerConfig:
    data = yaml.safe_load(Path(path).read_text()) or {}
    section: dict = data.get("tokenizer", data)
    if "vocab" not in section:
        raise ValueError(f"{path}: missing `vocab` entry")
    fields = dict(section)
    fields["vocab"] = _expand_path(str(fields["vocab"]))
    return TokenizerConfig(**fields)
