"""Two-pointer and sliding-window problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def count_pairs_below(arr: Iterable[int], target: int) -> int:
    """Return the number of index pairs whose values sum to less than ``target``."""
    ordered = sorted(arr)
    low, high = 0, len(ordered) - 1
    count = 0
    while low < high:
        if ordered[low] + ordered[high] >= target:
            high -= 1
        else:
            count += high - low
            low += 1
    return count


def count_triplets_with_sum(arr: Sequence[int], target: int) -> int:
    """Return the number of index triples whose values sum to ``target`` in ascending ``arr``."""
    n = len(arr)
    count = 0
    for i, first in enumerate(arr):
        j, k = i + 1, n - 1
        while j < k:
            total = first + arr[j] + arr[k]
            if total < target:
                j += 1
            elif total > target:
                k -= 1
            else:
                low_value, high_value = arr[j], arr[k]
                low_count = high_count = 0
                while j <= k and arr[j] == low_value:
                    low_count += 1
                    j += 1
                while j <= k and arr[k] == high_value:
                    high_count += 1
                    k -= 1
                if low_value == high_value:
                    count += low_count * (low_count - 1) // 2
                else:
                    count += low_count * high_count
    return count


def count_distinct_in_windows(arr: Sequence[int], k: int) -> list[int]:
    """Return the number of distinct values in every window of ``k`` consecutive values.

    Raises:
        ValueError: if ``k`` is less than 1.
    """
    if k < 1:
        raise ValueError("window size must be at least 1")
    counts: Counter[int] = Counter()
    result: list[int] = []
    for i, value in enumerate(arr):
        counts[value] += 1
        if i >= k - 1:
            result.append(len(counts))
            leaving = arr[i - k + 1]
            counts[leaving] -= 1
            if not counts[leaving]:
                del counts[leaving]
    return result


def subarray_with_sum(arr: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the 1-based bounds of the first subarray of non-negative values summing to ``target``.

    Returns None when there is no such subarray.
    """
    total = 0
    left = 0
    for right, value in enumerate(arr):
        total += value
        while total > target and left <= right:
            total -= arr[left]
            left += 1
        if total == target:
            return left + 1, right + 1
    return None


def count_pairs_with_sum_sorted(arr: Sequence[int], target: int) -> int:
    """Return the number of index pairs summing to ``target`` in ascending ``arr``."""
    low, high = 0, len(arr) - 1
    count = 0
    while low < high:
        total = arr[low] + arr[high]
        if total < target:
            low += 1
        elif total > target:
            high -= 1
        else:
            low_value, high_value = arr[low], arr[high]
            low_count = high_count = 0
            while low <= high and arr[low] == low_value:
                low += 1
                low_count += 1
            while low <= high and arr[high] == high_value:
                high -= 1
                high_count += 1
            if low_value == high_value:
                count += low_count * (low_count - 1) // 2
            else:
                count += low_count * high_count
    return count