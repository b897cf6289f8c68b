"""Normalization and pre-tokenization applied before the model."""

from __future__ import annotations

import re
import unicodedata

from .base import Offsets

WHITESPACE_REPLACEMENTS = {
    "\u00A0": " ",  # non-breaking space
    "\u1680": " ",
    "\u2000": " ",
    "\u2001": " ",
    "\u2002": " ",
    "\u2003": " ",
    "\u2004": " ",
    "\u2005": " ",
    "\u2006": " ",
    "\u2007": " ",
    "\u2008": " ",
    "\u2009": " ",
    "\u200A": " ",
    "\u202F": " ",
    "\u205F": " ",
    "\u3000": " ",
}

CONTROL_CHARS = {chr(i) for i in range(0, 32)} - {"\n", "\t"}
CONTROL_CHARS.add(chr(127))

# A word carries the whitespace in front of it; trailing whitespace is its own piece.
_WORD_RE = re.compile(r"\s*\S+|\s+")


def normalize_text(text: str) -> str:
    """Normalize Unicode text into a consistent form."""

    text = unicodedata.normalize("NFKC", text)
    text = text.translate({ord(k): v for k, v in WHITESPACE_REPLACEMENTS.items()})
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = "".join(ch for ch in text if ch not in CONTROL_CHARS)
    return text


def pre_tokenize(text: str) -> list[tuple[str, Offsets]]:
    """Split ``text`` into words with their character offsets.

    Joining the returned words gives back ``text`` unchanged.
    """

    return [(match.group(), match.span()) for match in _WORD_RE.finditer(text)]
