"""Unigram language model segmentation."""

from __future__ import annotations

import json
import math
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Optional

from .base import LoadError, Model, Offsets, Token
from .lattice import Lattice
from .trie import Trie, TrieBuilder
from .vocab import Piece, read_json_vocab, read_spm_vocab

UNK_PENALTY = 10.0

DEFAULT_PIECES: list[Piece] = [("<bos>", 0.0), ("<eos>", 0.0), ("<unk>", 0.0)]


class Unigram(Model):
    """Unigram model picking the segmentation with the highest total score.

    ``vocabulary`` is an ordered list of ``(token, score)`` pairs where the
    score is a log probability. ``bos_id``, ``eos_id`` and ``unk_id`` index
    into it; the three pieces are ordinary vocabulary slots.
    """

    def __init__(
        self,
        vocabulary: Sequence[Piece],
        bos_id: int,
        eos_id: int,
        unk_id: int,
    ) -> None:
        n = len(vocabulary)
        if n < 3:
            raise ValueError("We need at least bos, eos, and unk in the vocabulary")
        for label, idx in (("Bos", bos_id), ("Eos", eos_id), ("Unk", unk_id)):
            if not 0 <= idx < n:
                raise ValueError(f"{label} id is invalid: {idx}")

        self.vocab: list[str] = []
        self.scores: list[float] = []
        self.token_to_ids: dict[str, int] = {}
        builder = TrieBuilder()
        for idx, (token, score) in enumerate(vocabulary):
            self.vocab.append(token)
            self.scores.append(float(score))
            self.token_to_ids[token] = idx
            builder.push(token)

        if any(math.isnan(score) for score in self.scores):
            raise ValueError("scores must not be NaN")
        self.min_score = min(self.scores)
        if self.min_score == -math.inf:
            raise ValueError(f"min_score must be finite, got {self.min_score}")

        self.trie: Trie = builder.build()
        self.bos_id = bos_id
        self.eos_id = eos_id
        self.unk_id = unk_id

    def __repr__(self) -> str:
        return f"Unigram(vocab={len(self.vocab)})"

    def __len__(self) -> int:
        return len(self.vocab)

    def __iter__(self) -> Iterator[Piece]:
        return self.iter()

    def iter(self) -> Iterator[Piece]:
        """Yield ``(token, score)`` in id order."""

        return zip(self.vocab, self.scores)

    @classmethod
    def default(cls) -> Unigram:
        return cls(DEFAULT_PIECES, 0, 1, 2)

    def populate_nodes(self, lattice: Lattice) -> None:
        unk_score = self.min_score - UNK_PENALTY

        for begin_pos in range(len(lattice)):
            has_single_node = False
            for piece in self.trie.common_prefix_search(lattice.chars, begin_pos):
                idx = self.token_to_ids[piece]
                length = len(piece)
                lattice.insert(begin_pos, length, self.scores[idx], idx)
                if length == 1:
                    has_single_node = True

            if not has_single_node:
                lattice.insert(begin_pos, 1, unk_score, self.unk_id)

    def encode(self, sentence: str, fuse_unk: bool = False) -> list[str]:
        """Segment ``sentence`` into its best scoring pieces.

        With ``fuse_unk`` consecutive unknown pieces come back as one string.
        """

        lattice = Lattice.from_text(sentence, self.bos_id, self.eos_id, self.unk_id)
        self.populate_nodes(lattice)
        if not fuse_unk:
            return lattice.tokens()

        results: list[str] = []
        unknown: list[str] = []
        for node in lattice.viterbi()[1:-1]:
            item = lattice.piece(node)
            if node.vocab_id == self.unk_id:
                unknown.append(item)
                continue
            if unknown:
                results.append("".join(unknown))
                unknown = []
            results.append(item)
        if unknown:
            results.append("".join(unknown))
        return results

    def tokenize(
        self,
        sequence: Sequence[tuple[str, Offsets]],
        *,
        fuse_unk: bool = False,
    ) -> list[Token]:
        results: list[Token] = []
        for element, _offsets in sequence:
            for word, piece in enumerate(self.encode(element, fuse_unk=fuse_unk)):
                # Pieces outside the vocabulary map to id 0, not to unk_id.
                idx = self.token_to_ids.get(piece, 0)
                results.append(Token(idx, piece, (0, 0), word))
        return results

    def token_to_id(self, token: str) -> Optional[int]:
        return self.token_to_ids.get(token)

    def id_to_token(self, idx: int) -> Optional[str]:
        if 0 <= idx < len(self.vocab):
            return self.vocab[idx]
        return None

    def get_vocab(self) -> dict[str, int]:
        return dict(self.token_to_ids)

    def get_vocab_size(self) -> int:
        return len(self.vocab)

    def to_dict(self) -> dict:
        return {
            "type": "Unigram",
            "token_to_ids": self.token_to_ids,
            "vocab": self.vocab,
            "scores": self.scores,
            "min_score": self.min_score,
            "bos_id": self.bos_id,
            "eos_id": self.eos_id,
            "unk_id": self.unk_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Unigram:
        if data.get("type") != "Unigram":
            raise LoadError(f"not a unigram record: type={data.get('type')!r}")
        try:
            vocab = data["vocab"]
            scores = data["scores"]
            ids = (int(data["bos_id"]), int(data["eos_id"]), int(data["unk_id"]))
        except (KeyError, TypeError, ValueError) as exc:
            raise LoadError(f"invalid unigram record: {exc}") from exc
        if not isinstance(vocab, list) or not isinstance(scores, list) or len(vocab) != len(scores):
            raise LoadError("invalid unigram record: vocab and scores must be lists of equal length")
        return cls(list(zip(vocab, scores)), *ids)

    def save(self, folder: Path, name: Optional[str] = None) -> list[Path]:
        filename = f"{name}-unigram.json" if name else "unigram.json"
        path = Path(folder) / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
        return [path]

    @classmethod
    def from_file(cls, path: Path) -> Unigram:
        """Load a model written by ``save``; the trie is rebuilt from ``vocab``."""

        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise LoadError(f"cannot read model {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise LoadError(f"cannot read model {path}: expected a JSON object")
        return cls.from_dict(data)

    @classmethod
    def load(cls, path: Path) -> Unigram:
        """Load a JSON list of ``[token, score]`` pairs; bos/eos/unk are ids 0/1/2."""

        return cls(read_json_vocab(path), 0, 1, 2)

    @classmethod
    def load_spm(cls, path: Path) -> Unigram:
        """Load a tab-separated vocabulary export; unk/bos/eos are ids 0/1/2."""

        return cls(read_spm_vocab(path), bos_id=1, eos_id=2, unk_id=0)
