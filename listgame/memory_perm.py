"""Memory state holding a recency order as the index of a permutation."""

from __future__ import annotations

from dataclasses import dataclass
from math import factorial
from typing import Sequence

from listgame.permutation_graph import lex_index, move_to_front, perm_from_index


@dataclass
class MemoryPerm:
    size: int
    data: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.data <= self.max:
            raise ValueError(f"memory index {self.data} out of range")

    @property
    def max(self) -> int:
        return factorial(self.size) - 1

    @property
    def permutation(self) -> tuple[int, ...]:
        return perm_from_index(self.data, self.size)

    def access(self, pos: int) -> int:
        return self.permutation[pos]

    def mtf(self, request: int) -> None:
        """Move the requested item to the front of the stored order."""
        self.data = lex_index(move_to_front(self.permutation, request))

    def recompute(self, relabeling: Sequence[int]) -> "MemoryPerm":
        """Return the memory with every item renamed through ``relabeling``."""
        relabeled = tuple(relabeling[item] for item in self.permutation)
        return MemoryPerm(self.size, lex_index(relabeled))

    def format(self) -> str:
        return " ".join(str(item) for item in self.permutation)