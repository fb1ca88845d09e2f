"""Sorting problems: inversions, h-index, interval handling and merging."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import takewhile

Interval = Sequence[int]


def _sort_and_count(items: list[int]) -> tuple[list[int], int]:
    """Merge-sort ``items`` and count the inversions met on the way."""
    if len(items) <= 1:
        return items, 0
    mid = len(items) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(arr: Iterable[int]) -> int:
    """Return the number of pairs ``i < j`` with ``arr[i] > arr[j]``."""
    _, count = _sort_and_count(list(arr))
    return count


def h_index(citations: Iterable[int]) -> int:
    """Return the largest ``h`` such that ``h`` papers have at least ``h`` citations each."""
    ordered = sorted(citations, reverse=True)
    return sum(1 for rank, cited in enumerate(ordered, start=1) if cited >= rank)


def insert_interval(
    intervals: Sequence[Interval], new_interval: Interval
) -> list[list[int]]:
    """Insert ``new_interval`` into sorted, disjoint ``intervals``, merging overlaps."""
    start, end = new_interval
    before = list(takewhile(lambda iv: iv[1] < start, intervals))
    remaining = intervals[len(before):]
    overlapping = list(takewhile(lambda iv: iv[0] <= end, remaining))
    after = remaining[len(overlapping):]
    if overlapping:
        start = min(start, *(iv[0] for iv in overlapping))
        end = max(end, *(iv[1] for iv in overlapping))
    return (
        [list(iv) for iv in before]
        + [[start, end]]
        + [list(iv) for iv in after]
    )


def merge_without_extra_space(
    a: Sequence[int], b: Sequence[int]
) -> tuple[list[int], list[int]]:
    """Redistribute two ascending sequences so the first holds the smallest values.

    Returns the new contents of both, each ascending and of its original length.
    """
    first = list(a)
    second = list(b)
    for high, low in zip(range(len(first) - 1, -1, -1), range(len(second))):
        if first[high] <= second[low]:
            break
        first[high], second[low] = second[low], first[high]
    return sorted(first), sorted(second)


def min_removals(intervals: Iterable[Interval]) -> int:
    """Return the fewest intervals to remove so that the rest do not overlap."""
    ordered = sorted(intervals, key=lambda iv: iv[1])
    if not ordered:
        return 0
    last_end = ordered[0][1]
    removed = 0
    for start, end in ordered[1:]:
        if start < last_end:
            removed += 1
        else:
            last_end = end
    return removed


def merge_overlapping(intervals: Iterable[Interval]) -> list[list[int]]:
    """Merge overlapping or touching intervals into a sorted list of disjoint ones."""
    merged: list[list[int]] = []
    for start, end in sorted(list(iv) for iv in intervals):
        if not merged or start > merged[-1][1]:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged