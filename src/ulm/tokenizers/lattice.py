"""Segmentation lattice and Viterbi decoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Node:
    """Candidate piece covering ``chars[pos:pos + length]``."""

    node_id: int
    vocab_id: int
    pos: int
    length: int
    score: float

    @property
    def end(self) -> int:
        return self.pos + self.length


class Lattice:
    """Graph over character positions whose edges are candidate pieces.

    ``begin_nodes[p]`` and ``end_nodes[p]`` hold node ids in insertion order.
    A lattice is built for a single input and thrown away after decoding.
    """

    def __init__(self, sentence: str, bos_id: int, eos_id: int, unk_id: int) -> None:
        self._sentence = sentence
        self.chars: list[str] = list(sentence)
        self.bos_id = bos_id
        self.eos_id = eos_id
        self.unk_id = unk_id
        size = len(self.chars) + 1
        self.nodes: list[Node] = []
        self.begin_nodes: list[list[int]] = [[] for _ in range(size)]
        self.end_nodes: list[list[int]] = [[] for _ in range(size)]

        bos = self._append(pos=0, length=0, score=0.0, vocab_id=bos_id)
        self.end_nodes[0].append(bos)
        eos = self._append(pos=len(self.chars), length=0, score=0.0, vocab_id=eos_id)
        self.begin_nodes[len(self.chars)].append(eos)

    @classmethod
    def from_text(cls, text: str, bos_id: int, eos_id: int, unk_id: int) -> Lattice:
        return cls(text, bos_id, eos_id, unk_id)

    def __len__(self) -> int:
        return len(self.chars)

    def sentence(self) -> str:
        return self._sentence

    @property
    def bos_node(self) -> Node:
        return self.nodes[0]

    @property
    def eos_node(self) -> Node:
        return self.nodes[1]

    def _append(self, *, pos: int, length: int, score: float, vocab_id: int) -> int:
        node_id = len(self.nodes)
        self.nodes.append(Node(node_id, vocab_id, pos, length, score))
        return node_id

    def insert(self, pos: int, length: int, score: float, vocab_id: int) -> int:
        node_id = self._append(pos=pos, length=length, score=score, vocab_id=vocab_id)
        self.begin_nodes[pos].append(node_id)
        self.end_nodes[pos + length].append(node_id)
        return node_id

    def viterbi(self) -> list[Node]:
        """Return the best scoring path from BOS to EOS, both included.

        Every begin position must own at least one node; a position without
        one cuts the graph and the decode comes back empty.
        """

        best_score: list[float] = [0.0] * len(self.nodes)
        backpointer: list[Optional[int]] = [None] * len(self.nodes)

        for pos in range(len(self.chars) + 1):
            if not self.begin_nodes[pos]:
                return []
            for rnode in self.begin_nodes[pos]:
                score = self.nodes[rnode].score
                best: Optional[int] = None
                top = 0.0
                for lnode in self.end_nodes[pos]:
                    candidate = best_score[lnode] + score
                    if best is None or candidate > top:
                        best = lnode
                        top = candidate
                if best is None:
                    return []
                backpointer[rnode] = best
                best_score[rnode] = top

        path: list[Node] = []
        current: Optional[int] = self.eos_node.node_id
        while current is not None:
            path.append(self.nodes[current])
            current = backpointer[current]
        path.reverse()
        return path

    def piece(self, node: Node) -> str:
        return "".join(self.chars[node.pos : node.end])

    def tokens(self) -> list[str]:
        path = self.viterbi()
        return [self.piece(node) for node in path[1:-1]]
