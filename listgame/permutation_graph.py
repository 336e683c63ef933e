"""Permutations of a small list and the graph of adjacent transpositions."""

from __future__ import annotations

from functools import cached_property
from itertools import combinations
from math import factorial
from typing import Iterator, Optional, Sequence, Tuple

Permutation = Tuple[int, ...]


def diameter_bound(size: int) -> int:
    """Largest inversion distance between two permutations of ``size`` items."""
    return size * (size - 1) // 2


def next_permutation(perm: Sequence[int]) -> Optional[Permutation]:
    """Return the lexicographically next permutation, or None after the last one."""
    items = list(perm)
    i = len(items) - 1
    while i > 0 and items[i - 1] >= items[i]:
        i -= 1
    if i <= 0:
        return None
    j = len(items) - 1
    while items[j] <= items[i - 1]:
        j -= 1
    items[i - 1], items[j] = items[j], items[i - 1]
    items[i:] = reversed(items[i:])
    return tuple(items)


def lex_index(perm: Sequence[int]) -> int:
    """Rank of ``perm`` among all permutations of its items in lexicographic order."""
    n = len(perm)
    index = 0
    for i, value in enumerate(perm):
        smaller_later = sum(1 for other in perm[i + 1:] if other < value)
        index += smaller_later * factorial(n - 1 - i)
    return index


def perm_from_index(index: int, size: int) -> Permutation:
    """Permutation of ``range(size)`` with the given lexicographic rank."""
    if not 0 <= index < factorial(size):
        raise ValueError(f"index {index} out of range for permutations of size {size}")
    remaining = list(range(size))
    result = []
    for k in range(size - 1, -1, -1):
        digit, index = divmod(index, factorial(k))
        result.append(remaining.pop(digit))
    return tuple(result)


def position(perm: Sequence[int], item: int) -> int:
    """Position of ``item`` within ``perm``."""
    try:
        return list(perm).index(item)
    except ValueError:
        raise ValueError(f"item {item} is not in the permutation") from None


def inversions_wrt(perm: Sequence[int], other: Sequence[int]) -> int:
    """Number of item pairs that ``perm`` and ``other`` order differently."""
    if sorted(perm) != sorted(other):
        raise ValueError("permutations are over different items")
    rank = {item: pos for pos, item in enumerate(other)}
    ranks = [rank[item] for item in perm]
    return sum(1 for a, b in combinations(ranks, 2) if a > b)


def swap_adjacent(perm: Sequence[int], index: int) -> Permutation:
    """Swap the items at ``index`` and ``index + 1``."""
    if not 0 <= index < len(perm) - 1:
        raise ValueError(f"cannot swap positions {index} and {index + 1}")
    items = list(perm)
    items[index], items[index + 1] = items[index + 1], items[index]
    return tuple(items)


def compose_right(left: Sequence[int], right: Sequence[int]) -> Permutation:
    """Composition applying ``right`` first: ``result[i] = left[right[i]]``."""
    if len(left) != len(right):
        raise ValueError("permutations have different sizes")
    return tuple(left[r] for r in right)


def move_position(perm: Sequence[int], source: int, target: int) -> Permutation:
    """Move the item at position ``source`` to position ``target``."""
    if not (0 <= source < len(perm) and 0 <= target < len(perm)):
        raise ValueError("position out of range")
    items = list(perm)
    items.insert(target, items.pop(source))
    return tuple(items)


def move_forward(perm: Sequence[int], item: int, target: int) -> Permutation:
    """Move ``item`` forward to position ``target``."""
    source = position(perm, item)
    if target > source:
        raise ValueError("target lies behind the item")
    return move_position(perm, source, target)


def move_to_front(perm: Sequence[int], item: int) -> Permutation:
    """Move ``item`` to the front, keeping the order of the rest."""
    return move_forward(perm, item, 0)


def _all_permutations(size: int) -> Iterator[Permutation]:
    current: Optional[Permutation] = tuple(range(size))
    while current is not None:
        yield current
        current = next_permutation(current)


class PermutationGraph:
    """All permutations of a list with their transposition and composition tables."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self.all_perms: list[Permutation] = list(_all_permutations(size))
        self._index = {perm: i for i, perm in enumerate(self.all_perms)}
        self.adjacencies: list[tuple[int, ...]] = [
            tuple(self._index[swap_adjacent(perm, s)] for s in range(size - 1))
            for perm in self.all_perms
        ]

    def identity(self) -> Permutation:
        return tuple(range(self.size))

    def full_inverse(self) -> Permutation:
        return tuple(range(self.size - 1, -1, -1))

    def index_of(self, perm: Sequence[int]) -> int:
        try:
            return self._index[tuple(perm)]
        except KeyError:
            raise ValueError(f"{tuple(perm)} is not a permutation of size {self.size}") from None

    @cached_property
    def right_composition(self) -> list[list[int]]:
        return [
            [self._index[compose_right(left, right)] for right in self.all_perms]
            for left in self.all_perms
        ]

    @cached_property
    def quick_inversions(self) -> list[list[int]]:
        return [[inversions_wrt(a, b) for b in self.all_perms] for a in self.all_perms]

    def quick_compose_right(self, left_id: int, right_id: int) -> int:
        return self.right_composition[left_id][right_id]

    def quick_compose_left(self, left_id: int, right_id: int) -> int:
        return self.right_composition[right_id][left_id]

    def quick_inversion_wrt(self, i: int, j: int) -> int:
        return self.quick_inversions[i][j]

    def format_adjacencies(self) -> str:
        return "".join(
            f"{i}: [{','.join(str(a) for a in adj)}]\n"
            for i, adj in enumerate(self.adjacencies)
        )