"""Model interface shared by tokenization strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

Offsets = tuple[int, int]


@dataclass(frozen=True)
class Token:
    id: int
    value: str
    offsets: Offsets
    word: int


class LoadError(RuntimeError):
    """Raised when a vocabulary or saved model cannot be read."""

    def __init__(
        self,
        message: str,
        *,
        line_no: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.line_no = line_no
        self.line = line


class Model(ABC):
    """
    Capability contract for a tokenization model.

    A model turns pre-tokenized pieces of text into ``Token`` records and
    exposes its vocabulary. Implementations are read-only once constructed.
    """

    @abstractmethod
    def tokenize(
        self,
        sequence: Sequence[tuple[str, Offsets]],
        *,
        fuse_unk: bool = False,
    ) -> list[Token]:
        """Tokenize every ``(text, offsets)`` pair, in order.

        ``fuse_unk`` merges consecutive unknown pieces into one token.
        """

    @abstractmethod
    def token_to_id(self, token: str) -> Optional[int]:
        pass

    @abstractmethod
    def id_to_token(self, idx: int) -> Optional[str]:
        pass

    @abstractmethod
    def get_vocab(self) -> dict[str, int]:
        pass

    @abstractmethod
    def get_vocab_size(self) -> int:
        pass

    @abstractmethod
    def save(self, folder: Path, name: Optional[str] = None) -> list[Path]:
        """Write the model under ``folder`` and return the written paths."""
