"""Readers for exported unigram vocabularies."""

from __future__ import annotations

import json
from pathlib import Path

from .base import LoadError

Piece = tuple[str, float]

SPACE_MARKER = "▁"


def read_spm_vocab(path: Path) -> list[Piece]:
    """Read a ``token<TAB>score`` export, one piece per line.

    The marker ``▁`` stands for a literal space and is replaced on load.
    """

    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            lines = [raw_line.rstrip("\n") for raw_line in handle]
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"cannot read vocabulary {path}: {exc}") from exc

    table: list[Piece] = []
    for i, raw_line in enumerate(lines):
        fields = raw_line.replace(SPACE_MARKER, " ").split("\t")
        if len(fields) != 2:
            raise LoadError(f"line {i} is invalid {raw_line!r}", line_no=i, line=raw_line)
        token, score = fields
        try:
            table.append((token, float(score)))
        except ValueError as exc:
            raise LoadError(
                f"line {i} is invalid {raw_line!r}", line_no=i, line=raw_line
            ) from exc
    return table


def read_json_vocab(path: Path) -> list[Piece]:
    """Read a JSON array of ``[token, score]`` pairs."""

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise LoadError(f"cannot read vocabulary {path}: {exc}") from exc
    return pieces_from_json(data)


def pieces_from_json(data: object) -> list[Piece]:
    if not isinstance(data, list):
        raise LoadError("vocabulary must be a list of [token, score] pairs")
    table: list[Piece] = []
    for i, entry in enumerate(data):
        if (
            not isinstance(entry, (list, tuple))
            or len(entry) != 2
            or not isinstance(entry[0], str)
            or isinstance(entry[1], bool)
            or not isinstance(entry[1], (int, float))
        ):
            raise LoadError(f"entry {i} is invalid {entry!r}", line_no=i)
        table.append((entry[0], float(entry[1])))
    return table
