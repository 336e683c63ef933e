"""Potential iteration on the game between a list algorithm and a pairwise optimum.

Adversary vertices pair a reachable pairwise state with the algorithm's list
order; algorithm vertices additionally hold the request just issued. Every
potential is an integer, as in the half-move cost model of the pairwise states.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, Sequence

from listgame.pairwise_wf_manager import PairwiseWfManager
from listgame.permutation_graph import (
    PermutationGraph,
    move_forward,
    move_to_front,
    position,
)


def _format_perm(perm: Sequence[int]) -> str:
    return " ".join(str(item) for item in perm)


class PairwiseGameGraph:
    """Bipartite game graph with one potential per vertex."""

    def __init__(
        self,
        wf: PairwiseWfManager,
        graph: PermutationGraph,
        ratio: float,
        adv_multiplier: int,
        alg_multiplier: int,
    ) -> None:
        if wf.size != graph.size:
            raise ValueError("state manager and permutation graph have different sizes")
        if not wf.reachable_workfunctions:
            raise ValueError("the state manager has no reachable states; initialize it first")
        self.wf = wf
        self.graph = graph
        self.size = graph.size
        self.count = len(graph.all_perms)
        self.ratio = ratio
        self.adv_multiplier = adv_multiplier
        self.alg_multiplier = alg_multiplier
        self.advsize = wf.reachable_workfunctions * self.count
        self.algsize = self.advsize * self.size
        self.adv_vertices: list[int] = [0] * self.advsize
        self.alg_vertices: list[int] = [0] * self.algsize

    def decode_adv(self, index: int) -> tuple[int, int]:
        return divmod(index, self.count)

    def encode_adv(self, wf_index: int, perm_index: int) -> int:
        return wf_index * self.count + perm_index

    def decode_alg(self, index: int) -> tuple[int, int, int]:
        rest, request = divmod(index, self.size)
        wf_index, perm_index = divmod(rest, self.count)
        return wf_index, perm_index, request

    def encode_alg(self, wf_index: int, perm_index: int, request: int) -> int:
        return (wf_index * self.count + perm_index) * self.size + request

    def adv_cost(self, wf_index: int, request: int) -> int:
        return int(self.ratio * self.adv_multiplier * self.wf.update_cost(wf_index, request))

    def alg_cost(self, perm_one: int, perm_two: int, request: int) -> int:
        """Cost of serving ``request`` from ``perm_one`` and then rearranging to ``perm_two``."""
        access = position(self.graph.all_perms[perm_one], request)
        rearrange = self.graph.quick_inversion_wrt(perm_one, perm_two)
        return self.alg_multiplier * (access + rearrange)

    def min_adv_potential(self) -> int:
        return min(self.adv_vertices)

    def update_adv(self) -> bool:
        """Set every adversary potential to its best request; report any change."""
        changed = False
        for index in range(self.advsize):
            wf_index, perm_index = self.decode_adv(index)
            new_pot = max(
                self.alg_vertices[self.encode_alg(self.wf.adjacency(wf_index, r), perm_index, r)]
                - self.adv_cost(wf_index, r)
                for r in range(self.size)
            )
            if self.adv_vertices[index] != new_pot:
                self.adv_vertices[index] = new_pot
                changed = True
        return changed

    def _update_alg_with(self, moves: Callable[[int, int], Iterable[int]]) -> bool:
        changed = False
        for index in range(self.algsize):
            wf_index, perm_index, request = self.decode_alg(index)
            new_pot = min(
                self.adv_vertices[self.encode_adv(wf_index, p)]
                + self.alg_cost(perm_index, p, request)
                for p in moves(perm_index, request)
            )
            if self.alg_vertices[index] != new_pot:
                self.alg_vertices[index] = new_pot
                changed = True
        return changed

    def update_alg(self) -> bool:
        """Let the algorithm rearrange its list into any order."""
        return self._update_alg_with(lambda perm_index, request: range(self.count))

    def update_alg_stay_or_mtf(self) -> bool:
        """Let the algorithm either stay or move the request to the front."""

        def moves(perm_index: int, request: int) -> tuple[int, int]:
            front = move_to_front(self.graph.all_perms[perm_index], request)
            return perm_index, self.graph.index_of(front)

        return self._update_alg_with(moves)

    def update_alg_request_moves_forward(self) -> bool:
        """Let the algorithm move the request forward to any position."""

        def moves(perm_index: int, request: int) -> list[int]:
            perm = self.graph.all_perms[perm_index]
            return [
                self.graph.index_of(move_forward(perm, request, target))
                for target in range(position(perm, request) + 1)
            ]

        return self._update_alg_with(moves)

    def _format_adv(self, index: int) -> str:
        wf_index, perm_index = self.decode_adv(index)
        return (
            f"ADV vertex: index {index}, work function index {wf_index}, permutation: "
            f"{_format_perm(self.graph.all_perms[perm_index])}, "
            f"potential {self.adv_vertices[index]}.\n"
        )

    def _format_alg(self, index: int) -> str:
        wf_index, perm_index, request = self.decode_alg(index)
        return (
            f"ALG vertex: index {index}, permutation: "
            f"{_format_perm(self.graph.all_perms[perm_index])}, request {request}, "
            f"work function {wf_index}, potential {self.alg_vertices[index]}.\n"
        )

    def format_potential(self) -> str:
        """Describe the vertices reachable from adversary vertex 0 along tight algorithm moves."""
        lines: list[str] = []
        adv_seen = {0}
        alg_seen: set[int] = set()
        queue: deque[tuple[bool, int]] = deque([(True, 0)])
        while queue:
            is_adv, index = queue.popleft()
            if is_adv:
                wf_index, perm_index = self.decode_adv(index)
                lines.append(self._format_adv(index))
                for r in range(self.size):
                    next_wf = self.wf.adjacency(wf_index, r)
                    next_alg = self.encode_alg(next_wf, perm_index, r)
                    lines.append(
                        f"adv{index} with req {r}: updated work function number {next_wf}. "
                        f"Next alg{next_alg}.\n"
                    )
                    if next_alg not in alg_seen:
                        alg_seen.add(next_alg)
                        queue.append((False, next_alg))
            else:
                wf_index, perm_index, request = self.decode_alg(index)
                lines.append(self._format_alg(index))
                for p in range(self.count):
                    next_adv = self.encode_adv(wf_index, p)
                    cost = self.alg_cost(perm_index, p, request)
                    if self.adv_vertices[next_adv] + cost <= self.alg_vertices[index]:
                        lines.append(
                            f"Given request {request}, ALG switches to "
                            f"{_format_perm(self.graph.all_perms[p])}, moving to vertex "
                            f"adv{next_adv} w/ potential {self.adv_vertices[next_adv]}.\n"
                        )
                        if next_adv not in adv_seen:
                            adv_seen.add(next_adv)
                            queue.append((True, next_adv))
                        break
        return "".join(lines)