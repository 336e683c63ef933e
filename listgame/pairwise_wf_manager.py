"""Reachable states of an algorithm tracked pair by pair against the optimum.

Each unordered pair of items holds one of three values: 0 means the first
item of the pair is ahead, 2 means the second one is, and 1 means the order
is undecided. Costs are counted in half-moves, so one step between adjacent
values costs 1.
"""

from __future__ import annotations

import random
import struct
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from listgame.permutation_graph import diameter_bound
from listgame.workfunction import SerializationError

_COUNT = struct.Struct("<Q")
_LEVELS = 3


def pair_index(size: int, i: int, j: int) -> int:
    """Index of the unordered pair ``{i, j}`` among all pairs in lexicographic order."""
    if i == j:
        raise ValueError("a pair needs two distinct items")
    low, high = min(i, j), max(i, j)
    if low < 0 or high >= size:
        raise ValueError(f"pair ({i}, {j}) out of range for size {size}")
    return low * size - low * (low + 1) // 2 + (high - low - 1)


@dataclass
class PairwiseState:
    size: int
    vals: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        pairs = diameter_bound(self.size)
        if not self.vals:
            self.vals = [0] * pairs
        elif len(self.vals) != pairs:
            raise ValueError(f"expected {pairs} pair values, got {len(self.vals)}")

    def copy(self) -> "PairwiseState":
        return PairwiseState(self.size, list(self.vals))

    def key(self) -> tuple[int, ...]:
        return tuple(self.vals)

    def update(self, request: int) -> int:
        """Apply a request in place and return the number of half-moves paid."""
        if not 0 <= request < self.size:
            raise ValueError(f"request {request} out of range")
        cost = 0
        for i in range(request):
            index = pair_index(self.size, i, request)
            if self.vals[index] <= 1:
                self.vals[index] += 1
                cost += 1
        for i in range(request + 1, self.size):
            index = pair_index(self.size, request, i)
            if self.vals[index] > 0:
                self.vals[index] -= 1
                cost += 1
        return cost

    def format(self) -> str:
        parts = [
            f"({i}, {j})->{self.vals[pair_index(self.size, i, j)]}, "
            for i in range(self.size)
            for j in range(i + 1, self.size)
        ]
        return "".join(parts) + "\n"


class PairwiseWfManager:
    """Enumerates reachable pairwise states and their transitions."""

    def __init__(self, size: int, seed: Optional[int] = None) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self.pairs = diameter_bound(size)
        rng = random.Random(seed)
        self.zobrist = [[rng.getrandbits(64) for _ in range(_LEVELS)] for _ in range(self.pairs)]
        self.reachable_wfs: list[PairwiseState] = []
        self.adjacent_functions: list[tuple[int, ...]] = []
        self.update_costs: list[tuple[int, ...]] = []
        self.hash_to_index: dict[int, int] = {}

    @property
    def reachable_workfunctions(self) -> int:
        return len(self.reachable_wfs)

    def initial_state(self) -> PairwiseState:
        return PairwiseState(self.size)

    def hash(self, state: PairwiseState) -> int:
        h = 0
        for keys, value in zip(self.zobrist, state.vals):
            h ^= keys[value]
        return h

    def adjacency(self, wf_index: int, request: int) -> int:
        return self.adjacent_functions[wf_index][request]

    def update_cost(self, wf_index: int, request: int) -> int:
        return self.update_costs[wf_index][request]

    def serialize_reachable(self, path) -> None:
        state_row = struct.Struct(f"<{self.pairs}h")
        adj_row = struct.Struct(f"<{self.size}I")
        cost_row = struct.Struct(f"<{self.size}h")
        with open(path, "wb") as handle:
            handle.write(_COUNT.pack(len(self.reachable_wfs)))
            for state in self.reachable_wfs:
                handle.write(state_row.pack(*state.vals))
            for adj in self.adjacent_functions:
                handle.write(adj_row.pack(*adj))
            for costs in self.update_costs:
                handle.write(cost_row.pack(*costs))

    def deserialize_reachable(self, path) -> None:
        data = Path(path).read_bytes()
        if len(data) < _COUNT.size:
            raise SerializationError("the number of reachable work functions was not read correctly")
        (n,) = _COUNT.unpack_from(data)
        offset = _COUNT.size

        def read_rows(row: struct.Struct, what: str) -> list[tuple[int, ...]]:
            nonlocal offset
            end = offset + n * row.size
            if len(data) < end:
                raise SerializationError(f"the array of {what} was not read correctly")
            rows = [row.unpack_from(data, offset + k * row.size) for k in range(n)]
            offset = end
            return rows

        states = read_rows(struct.Struct(f"<{self.pairs}h"), "reachable work functions")
        adjacencies = read_rows(struct.Struct(f"<{self.size}I"), "work function adjacencies")
        costs = read_rows(struct.Struct(f"<{self.size}h"), "update costs")
        self.reachable_wfs = [PairwiseState(self.size, list(vals)) for vals in states]
        self.adjacent_functions = adjacencies
        self.update_costs = costs

    def fill_hash_to_index(self) -> None:
        self.hash_to_index = {self.hash(state): i for i, state in enumerate(self.reachable_wfs)}

    def initialize_reachable(self, path) -> None:
        if Path(path).exists():
            self.deserialize_reachable(path)
            self.fill_hash_to_index()
        else:
            self.initialize_reachable_from_scratch()
            self.serialize_reachable(path)

    def initialize_reachable_from_scratch(self) -> None:
        self.hash_to_index = {}
        reachable: list[PairwiseState] = []
        adjacencies_by_hash: list[list[int]] = []
        costs: list[tuple[int, ...]] = []
        initial = self.initial_state()
        seen = {self.hash(initial)}
        queue = deque([initial])
        while queue:
            front = queue.popleft()
            self.hash_to_index[self.hash(front)] = len(reachable)
            reachable.append(front)
            adj: list[int] = []
            upd: list[int] = []
            for request in range(self.size):
                new_state = front.copy()
                upd.append(new_state.update(request))
                h = self.hash(new_state)
                adj.append(h)
                if h not in seen:
                    seen.add(h)
                    queue.append(new_state)
            adjacencies_by_hash.append(adj)
            costs.append(tuple(upd))
        self.reachable_wfs = reachable
        self.update_costs = costs
        self.adjacent_functions = [
            tuple(self.hash_to_index[h] for h in adj) for adj in adjacencies_by_hash
        ]

    def format_reachable(self) -> str:
        return "".join(
            f"Reachable pairwise work function of id (index in array) {i}:\n" + state.format()
            for i, state in enumerate(self.reachable_wfs)
        )