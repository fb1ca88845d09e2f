"""Binary-search problems over arrays and answer spaces."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from math import inf


def can_place(stalls: Sequence[int], dist: int, cows: int) -> bool:
    """Return True if ``cows`` cows fit in sorted ``stalls`` at least ``dist`` apart."""
    placed = 1
    last = stalls[0]
    for position in stalls:
        if position - last >= dist:
            placed += 1
            last = position
        if placed >= cows:
            return True
    return False


def aggressive_cows(stalls: Iterable[int], k: int) -> int:
    """Return the largest minimum distance at which ``k`` cows can be placed.

    Raises:
        ValueError: if there are no stalls.
    """
    ordered = sorted(stalls)
    if not ordered:
        raise ValueError("stalls must not be empty")
    low, high = 1, ordered[-1] - ordered[0]
    while low <= high:
        mid = (low + high) // 2
        if can_place(ordered, mid, k):
            low = mid + 1
        else:
            high = mid - 1
    return high


def students_needed(pages: Iterable[int], limit: int) -> int:
    """Return how many students read the books in order, each reading at most ``limit``."""
    students = 1
    load = 0
    for count in pages:
        if load + count <= limit:
            load += count
        else:
            students += 1
            load = count
    return students


def allocate_pages(pages: Sequence[int], k: int) -> int:
    """Return the smallest maximum load when ``pages`` is split among ``k`` students.

    Returns -1 when there are fewer books than students.

    Raises:
        ValueError: if there are no books.
    """
    if len(pages) < k:
        return -1
    if not pages:
        raise ValueError("pages must not be empty")
    low, high = max(pages), sum(pages)
    while low <= high:
        mid = (low + high) // 2
        if students_needed(pages, mid) <= k:
            high = mid - 1
        else:
            low = mid + 1
    return low


def kth_element(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest (1-based) value of two ascending sequences combined.

    Raises:
        ValueError: if ``k`` is outside ``1..len(a) + len(b)``.
    """
    if len(a) > len(b):
        a, b = b, a
    m, n = len(a), len(b)
    if not 1 <= k <= m + n:
        raise ValueError(f"k must lie between 1 and {m + n}")
    low, high = max(k - n, 0), min(k, m)
    while low <= high:
        cut_a = (low + high) // 2
        cut_b = k - cut_a
        left_a = a[cut_a - 1] if cut_a > 0 else -inf
        left_b = b[cut_b - 1] if cut_b > 0 else -inf
        right_a = a[cut_a] if cut_a < m else inf
        right_b = b[cut_b] if cut_b < n else inf
        if left_a <= right_b and left_b <= right_a:
            return max(left_a, left_b)
        if left_a > right_b:
            high = cut_a - 1
        else:
            low = cut_a + 1
    raise ValueError("inputs must be sorted in ascending order")


def kth_missing(arr: Sequence[int], k: int) -> int:
    """Return the ``k``-th positive integer absent from strictly ascending positive ``arr``."""
    index = bisect_left(range(len(arr)), k, key=lambda i: arr[i] - i - 1)
    return index + k


def count_occurrences(arr: Iterable[int], target: int) -> int:
    """Return how many times ``target`` occurs in ``arr``."""
    return sum(1 for value in arr if value == target)


def peak_element(arr: Sequence[int]) -> int:
    """Return the index of an element larger than its neighbours, or -1.

    Adjacent values are expected to differ.

    Raises:
        ValueError: if ``arr`` is empty.
    """
    n = len(arr)
    if n == 0:
        raise ValueError("array must not be empty")
    if n == 1 or arr[0] > arr[1]:
        return 0
    if arr[-1] > arr[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] > arr[mid - 1] and arr[mid] > arr[mid + 1]:
            return mid
        if arr[mid] > arr[mid - 1]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated(arr: Sequence[int], key: int) -> int:
    """Return the index of ``key`` in a rotated ascending sequence, or -1."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == key:
            return mid
        if arr[low] <= arr[mid]:
            if arr[low] <= key <= arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        else:
            if arr[mid] <= key <= arr[high]:
                low = mid + 1
            else:
                high = mid - 1
    return -1