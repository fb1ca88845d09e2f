"""Array problems: pairs, triplets, rotations, duplicates and friends."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations, groupby


def has_pair_with_sum(arr: Sequence[int], target: int) -> bool:
    """Return True if two distinct positions in ``arr`` hold values summing to ``target``."""
    seen: set[int] = set()
    for num in arr:
        if target - num in seen:
            return True
        seen.add(num)
    return False


def zero_sum_triplets(arr: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return every index triple ``(i, j, k)`` with ``i < j < k`` whose values sum to zero.

    Triples are listed in lexicographic order of their indices.
    """
    return [
        (i, j, k)
        for (i, a), (j, b), (k, c) in combinations(enumerate(arr), 3)
        if a + b + c == 0
    ]


def find_duplicates(nums: Iterable[int]) -> list[int]:
    """Return, in ascending order, each value that occurs more than once."""
    counts = Counter(nums)
    return sorted(value for value, count in counts.items() if count > 1)


def max_consecutive_ones(arr: Iterable[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(arr) if value == 1),
        default=0,
    )


def first_unique(arr: Sequence[int]) -> int:
    """Return the first value that occurs exactly once, or 0 if there is none."""
    counts = Counter(arr)
    return next((num for num in arr if counts[num] == 1), 0)


def second_largest(arr: Iterable[int]) -> int:
    """Return the largest value strictly below the maximum, or -1 if there is none.

    Only non-negative values are considered; -1 marks the absence of an answer.
    """
    values = list(arr)
    largest = max([-1, *values])
    return max((x for x in values if x > -1 and x != largest), default=-1)


def left_rotate(arr: Sequence[int], k: int) -> list[int]:
    """Return ``arr`` rotated ``k`` places to the left."""
    items = list(arr)
    if not items:
        return items
    k %= len(items)
    return items[k:] + items[:k]


def majority_elements(arr: Sequence[int]) -> list[int]:
    """Return, in ascending order, the values occurring more than ``len(arr) // 3`` times."""
    threshold = len(arr) // 3
    counts = Counter(arr)
    return sorted(value for value, count in counts.items() if count > threshold)


def min_height_difference(arr: Sequence[int], k: int) -> int:
    """Return the smallest possible spread after moving every height up or down by ``k``.

    A height may not become negative.

    Raises:
        ValueError: if ``arr`` is empty.
    """
    if not arr:
        raise ValueError("heights must not be empty")
    heights = sorted(arr)
    best = heights[-1] - heights[0]
    low_end = heights[0] + k
    high_end = heights[-1] - k
    for current, following in zip(heights, heights[1:]):
        lowest = min(low_end, following - k)
        highest = max(high_end, current + k)
        if lowest < 0:
            continue
        best = min(best, highest - lowest)
    return best


def push_zeros_to_end(arr: Iterable[int]) -> list[int]:
    """Return the values with every zero moved to the end, other values in order."""
    items = list(arr)
    non_zero = [x for x in items if x != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def remove_duplicates(arr: Iterable[int]) -> list[int]:
    """Collapse each run of equal adjacent values in a sorted sequence to one value."""
    return [value for value, _ in groupby(arr)]


def remove_element(arr: Iterable[int], val: int) -> list[int]:
    """Return the values of ``arr`` other than ``val``, in order."""
    return [x for x in arr if x != val]


def smallest_missing_positive(arr: Iterable[int]) -> int:
    """Return the smallest positive integer not present in ``arr``."""
    present = set(arr)
    candidate = 1
    while candidate in present:
        candidate += 1
    return candidate


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale, or 0.

    Raises:
        ValueError: if ``prices`` is empty.
    """
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    cheapest = prices[0]
    for price in prices[1:]:
        best = max(best, price - cheapest)
        cheapest = min(cheapest, price)
    return best


def sorted_union(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list without repeats."""
    return [value for value, _ in groupby(heapq.merge(a, b))]