"""Counting and set problems solved with hash maps."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def count_subarrays_with_xor(arr: Iterable[int], k: int) -> int:
    """Return the number of contiguous subarrays whose XOR equals ``k``."""
    seen = Counter({0: 1})
    prefix = 0
    count = 0
    for num in arr:
        prefix ^= num
        count += seen[prefix ^ k]
        seen[prefix] += 1
    return count


def count_subarrays_with_sum(arr: Iterable[int], k: int) -> int:
    """Return the number of contiguous subarrays whose sum equals ``k``."""
    seen = Counter({0: 1})
    prefix = 0
    count = 0
    for num in arr:
        prefix += num
        count += seen[prefix - k]
        seen[prefix] += 1
    return count


def count_pairs_with_sum(arr: Iterable[int], target: int) -> int:
    """Return the number of index pairs ``i < j`` whose values sum to ``target``."""
    seen: Counter[int] = Counter()
    count = 0
    for num in arr:
        count += seen[target - num]
        seen[num] += 1
    return count


def intersection(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Return the distinct values common to both inputs, in ascending order."""
    return sorted(set(a) & set(b))


def union_size(a: Iterable[int], b: Iterable[int]) -> int:
    """Return how many distinct values occur in either input."""
    return len(set(a) | set(b))


def longest_consecutive(arr: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among the values."""
    values = set(arr)
    best = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end + 1 in values:
            end += 1
        best = max(best, end - start + 1)
    return best