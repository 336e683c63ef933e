"""List-update algorithms that use a recency order as their memory.

Each step serves one request. It returns the new list order and the cost
paid, and it moves the request to the front of the memory's recency order.
The cost is the position of the request plus one per adjacent swap made.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

from listgame.memory_perm import MemoryPerm
from listgame.permutation_graph import (
    Permutation,
    inversions_wrt,
    move_position,
    position,
)


class StepResult(NamedTuple):
    perm: Permutation
    cost: int


class Candidate(NamedTuple):
    target: int
    perm: Permutation
    inversions: int


def _locate(perm: Sequence[int], memory: MemoryPerm, item: int) -> tuple[Permutation, int]:
    if memory.size != len(perm):
        raise ValueError(
            f"memory has size {memory.size} but the list has {len(perm)} items"
        )
    perm = tuple(perm)
    return perm, position(perm, item)


def _finish(perm: Permutation, source: int, target: int, memory: MemoryPerm, item: int) -> StepResult:
    moved = move_position(perm, source, target)
    memory.mtf(item)
    return StepResult(moved, source + (source - target))


def mru_step(perm: Sequence[int], memory: MemoryPerm, item: int) -> StepResult:
    """Move the request forward past every item used less recently than it."""
    perm, item_pos = _locate(perm, memory, item)
    rank = {entry: pos for pos, entry in enumerate(memory.permutation)}
    target = item_pos
    while target >= 1 and rank[perm[target - 1]] > rank[item]:
        target -= 1
    return _finish(perm, item_pos, target, memory, item)


def eager_candidates(perm: Sequence[int], memory: MemoryPerm, item: int) -> list[Candidate]:
    """Every forward move of the request, from staying put to the front.

    Each candidate carries its inversion count against the recency order.
    """
    perm, item_pos = _locate(perm, memory, item)
    recency = memory.permutation
    candidates = []
    for target in range(item_pos, -1, -1):
        moved = move_position(perm, item_pos, target)
        candidates.append(Candidate(target, moved, inversions_wrt(moved, recency)))
    return candidates


def mru_eager_step(perm: Sequence[int], memory: MemoryPerm, item: int) -> StepResult:
    """Move the request as far forward as the fewest inversions allow."""
    candidates = eager_candidates(perm, memory, item)
    best = min(c.inversions for c in candidates)
    target = min(c.target for c in candidates if c.inversions == best)
    perm, item_pos = _locate(perm, memory, item)
    return _finish(perm, item_pos, target, memory, item)


def less_recent_step(perm: Sequence[int], memory: MemoryPerm, item: int, ratio: float) -> StepResult:
    """Move to front when enough items ahead were used less recently; else stay."""
    perm, item_pos = _locate(perm, memory, item)
    recency = memory.permutation
    request_rank = position(recency, item)
    less_recent = sum(1 for entry in perm[:item_pos] if position(recency, entry) > request_rank)
    target = 0 if less_recent >= ratio * item_pos else item_pos
    return _finish(perm, item_pos, target, memory, item)


def mru_semi_eager_step(perm: Sequence[int], memory: MemoryPerm, item: int) -> StepResult:
    """Among the moves with fewest inversions, take the middle one.

    With two such moves the one nearer the front is chosen.
    """
    candidates = eager_candidates(perm, memory, item)
    best = min(c.inversions for c in candidates)
    choices = [c.target for c in candidates if c.inversions == best]
    target = choices[len(choices) // 2]
    perm, item_pos = _locate(perm, memory, item)
    return _finish(perm, item_pos, target, memory, item)


def mru_first_inversion_step(perm: Sequence[int], memory: MemoryPerm, item: int) -> StepResult:
    """Move the request just ahead of the first item used less recently than it."""
    perm, item_pos = _locate(perm, memory, item)
    recency = memory.permutation
    request_rank = position(recency, item)
    target = next(
        (t for t in range(item_pos + 1) if request_rank < position(recency, perm[t])),
        item_pos,
    )
    return _finish(perm, item_pos, target, memory, item)