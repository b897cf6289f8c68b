"""Prefix index over vocabulary pieces."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

ROOT = 0


@dataclass
class TrieNode:
    children: dict[str, int] = field(default_factory=dict)
    is_leaf: bool = False


class TrieBuilder:
    """Collects pieces into an arena of nodes, then freezes it into a Trie."""

    def __init__(self) -> None:
        self._nodes: list[TrieNode] = [TrieNode()]
        self._size = 0

    def push(self, token: Iterable[str]) -> None:
        idx = ROOT
        for char in token:
            child = self._nodes[idx].children.get(char)
            if child is None:
                child = len(self._nodes)
                self._nodes.append(TrieNode())
                self._nodes[idx].children[char] = child
            idx = child
        if not self._nodes[idx].is_leaf:
            self._nodes[idx].is_leaf = True
            self._size += 1

    def extend(self, tokens: Iterable[Iterable[str]]) -> TrieBuilder:
        for token in tokens:
            self.push(token)
        return self

    def build(self) -> Trie:
        trie = Trie(self._nodes, self._size)
        self._nodes = [TrieNode()]
        self._size = 0
        return trie


class Trie:
    """Read-only trie answering common prefix queries.

    Nodes live in a flat list and refer to their children by index, with the
    root at index 0. Nothing mutates the arena after ``TrieBuilder.build``.
    """

    def __init__(self, nodes: list[TrieNode], size: int) -> None:
        self._nodes = nodes
        self._size = size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, token: object) -> bool:
        if not isinstance(token, str):
            return False
        idx = ROOT
        for char in token:
            child = self._nodes[idx].children.get(char)
            if child is None:
                return False
            idx = child
        return self._nodes[idx].is_leaf

    def common_prefix_search(self, chars: Sequence[str], start: int = 0) -> list[str]:
        """Return every stored piece that prefixes ``chars[start:]``, shortest first."""

        results: list[str] = []
        idx = ROOT
        for end in range(start, len(chars)):
            child = self._nodes[idx].children.get(chars[end])
            if child is None:
                break
            idx = child
            if self._nodes[idx].is_leaf:
                results.append("".join(chars[start : end + 1]))
        return results
