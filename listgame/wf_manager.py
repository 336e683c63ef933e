"""Work functions reachable from the initial one under list requests."""

from __future__ import annotations

import random
import struct
from collections import deque
from math import factorial
from pathlib import Path
from typing import Optional, Sequence

from listgame.permutation_graph import PermutationGraph, diameter_bound, position
from listgame.workfunction import SerializationError, WorkFunction

_COUNT = struct.Struct("<Q")
_MASK64 = (1 << 64) - 1


def dynamic_update(graph: PermutationGraph, vals: Sequence[int]) -> list[int]:
    """Lower every value to at most one more than any neighbour's value."""
    result = list(vals)
    for value in range(diameter_bound(graph.size)):
        for i, adjacent in enumerate(graph.adjacencies):
            if result[i] == value:
                for adj in adjacent:
                    result[adj] = min(value + 1, result[adj])
    return result


def initial_workfunction(graph: PermutationGraph) -> list[int]:
    """Work function of an adversary that starts at the identity permutation."""
    bound = diameter_bound(graph.size)
    vals = [0] + [bound] * (len(graph.all_perms) - 1)
    return dynamic_update(graph, vals)


def avoid_zero_byte(value: int) -> int:
    """Make sure the lowest byte of a hash is never zero."""
    return value if value & 0xFF else value | 1


class WfManager:
    """Enumerates reachable work functions and their transitions."""

    def __init__(self, graph: PermutationGraph, seed: Optional[int] = None) -> None:
        self.graph = graph
        self.size = graph.size
        self.count = factorial(graph.size)
        rng = random.Random(seed)
        levels = diameter_bound(graph.size) + 1
        self.zobrist = [[rng.getrandbits(64) for _ in range(levels)] for _ in range(self.count)]
        self.initial = initial_workfunction(graph)
        self.reachable_wfs: list[tuple[int, ...]] = []
        self.adjacent_functions: list[tuple[int, ...]] = []
        self.min_update_costs: list[tuple[int, ...]] = []
        self.hash_to_index: dict[int, int] = {}

    @property
    def reachable_workfunctions(self) -> int:
        return len(self.reachable_wfs)

    def flat_update(self, vals: Sequence[int], request: int) -> list[int]:
        return [v + position(perm, request) for v, perm in zip(vals, self.graph.all_perms)]

    def cut_minimum(self, vals: Sequence[int]) -> list[int]:
        m = min(vals)
        return [v - m for v in vals]

    def _step(self, vals: Sequence[int], request: int) -> tuple[list[int], int]:
        updated = self.flat_update(vals, request)
        cost = min(updated)
        return dynamic_update(self.graph, self.cut_minimum(updated)), cost

    def hash(self, vals: Sequence[int]) -> int:
        h = 0
        for i, v in enumerate(vals):
            h ^= self.zobrist[i][v]
        return avoid_zero_byte(h & _MASK64)

    def hash_under_right_composition(self, vals: Sequence[int], perm_id: int) -> int:
        h = 0
        for i, v in enumerate(vals):
            h ^= self.zobrist[self.graph.quick_compose_right(perm_id, i)][v]
        return avoid_zero_byte(h)

    def _mirror_target(self, perm_id: int, i: int) -> int:
        return self.graph.quick_compose_left(
            self.count - 1, self.graph.quick_compose_right(perm_id, i)
        )

    def hash_under_mirrored_composition(self, vals: Sequence[int], perm_id: int) -> int:
        h = 0
        for i, v in enumerate(vals):
            h ^= self.zobrist[self._mirror_target(perm_id, i)][v]
        return avoid_zero_byte(h)

    def right_composition(self, vals: Sequence[int], perm_id: int) -> list[int]:
        result = [0] * self.count
        for i, v in enumerate(vals):
            result[self.graph.quick_compose_right(perm_id, i)] = v
        return result

    def mirrored_composition(self, vals: Sequence[int], perm_id: int) -> list[int]:
        result = [0] * self.count
        for i, v in enumerate(vals):
            result[self._mirror_target(perm_id, i)] = v
        return result

    def adjacency(self, wf_index: int, request: int) -> int:
        return self.adjacent_functions[wf_index][request]

    def update_cost(self, wf_index: int, request: int) -> int:
        return self.min_update_costs[wf_index][request]

    def any_symmetry_in_reachable(self, vals: Sequence[int], reachable_hashes) -> bool:
        """Whether any symmetric image of ``vals`` already has its hash recorded."""
        return any(
            self.hash_under_right_composition(vals, p) in reachable_hashes
            or self.hash_under_mirrored_composition(vals, p) in reachable_hashes
            for p in range(self.count)
        )

    def count_reachable(self) -> int:
        """Count reachable work functions up to the symmetries of the permutahedron."""
        reachable_hashes = {self.hash(self.initial)}
        queue = deque([self.initial])
        while queue:
            front = queue.popleft()
            for request in range(self.size):
                new_wf, _ = self._step(front, request)
                if not self.any_symmetry_in_reachable(new_wf, reachable_hashes):
                    reachable_hashes.add(self.hash(new_wf))
                    queue.append(new_wf)
        return len(reachable_hashes)

    def serialize_reachable(self, path) -> None:
        wf_row = struct.Struct(f"<{self.count}h")
        adj_row = struct.Struct(f"<{self.size}I")
        cost_row = struct.Struct(f"<{self.size}h")
        with open(path, "wb") as handle:
            handle.write(_COUNT.pack(len(self.reachable_wfs)))
            for wf in self.reachable_wfs:
                handle.write(wf_row.pack(*wf))
            for adj in self.adjacent_functions:
                handle.write(adj_row.pack(*adj))
            for costs in self.min_update_costs:
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

        self.reachable_wfs = read_rows(struct.Struct(f"<{self.count}h"), "reachable work functions")
        self.adjacent_functions = read_rows(struct.Struct(f"<{self.size}I"), "work function adjacencies")
        self.min_update_costs = read_rows(struct.Struct(f"<{self.size}h"), "min update costs")

    def fill_hash_to_index(self) -> None:
        self.hash_to_index = {self.hash(wf): i for i, wf in enumerate(self.reachable_wfs)}

    def initialize_reachable(self, path) -> None:
        if Path(path).exists():
            self.deserialize_reachable(path)
            self.fill_hash_to_index()
        else:
            self.initialize_reachable_from_scratch()
            self.serialize_reachable(path)

    def initialize_reachable_from_scratch(self) -> None:
        self.hash_to_index = {}
        reachable: list[tuple[int, ...]] = []
        adjacencies_by_hash: list[list[int]] = []
        costs: list[tuple[int, ...]] = []
        seen = {self.hash(self.initial)}
        queue = deque([self.initial])
        while queue:
            front = queue.popleft()
            self.hash_to_index[self.hash(front)] = len(reachable)
            reachable.append(tuple(front))
            adj: list[int] = []
            upd: list[int] = []
            for request in range(self.size):
                new_wf, cost = self._step(front, request)
                h = self.hash(new_wf)
                adj.append(h)
                upd.append(cost)
                if h not in seen:
                    seen.add(h)
                    queue.append(new_wf)
            adjacencies_by_hash.append(adj)
            costs.append(tuple(upd))
        self.reachable_wfs = reachable
        self.min_update_costs = costs
        self.adjacent_functions = [
            tuple(self.hash_to_index[h] for h in adj) for adj in adjacencies_by_hash
        ]

    def format_reachable(self) -> str:
        return "".join(
            f"Reachable work function of id (index in array) {i}:\n"
            + WorkFunction(list(wf)).format()
            for i, wf in enumerate(self.reachable_wfs)
        )