"""Matrix problems: rotation, searching, zeroing and spiral traversal."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def rotate_anticlockwise(mat: Matrix) -> list[list[int]]:
    """Return ``mat`` rotated 90 degrees anticlockwise."""
    return [list(column) for column in zip(*mat)][::-1]


def contains(mat: Matrix, x: int) -> bool:
    """Return True if ``x`` occurs anywhere in ``mat``."""
    return any(x in row for row in mat)


def search_flattened(mat: Matrix, x: int) -> bool:
    """Binary-search a matrix whose rows, read one after another, are ascending."""
    if not mat or not mat[0]:
        return False
    width = len(mat[0])
    low, high = 0, len(mat) * width - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, width)
        value = mat[row][col]
        if value == x:
            return True
        if value < x:
            low = mid + 1
        else:
            high = mid - 1
    return False


def search_row_sorted(mat: Matrix, x: int) -> bool:
    """Search a matrix whose rows are each ascending, one binary search per row."""
    for row in mat:
        pos = bisect_left(row, x)
        if pos < len(row) and row[pos] == x:
            return True
    return False


def search_staircase(mat: Matrix, x: int) -> bool:
    """Search a matrix whose rows and columns are ascending, starting top-right."""
    if not mat or not mat[0]:
        return False
    row, col = 0, len(mat[0]) - 1
    while row < len(mat) and col >= 0:
        value = mat[row][col]
        if value == x:
            return True
        if value < x:
            row += 1
        else:
            col -= 1
    return False


def set_zeroes(mat: Matrix) -> list[list[int]]:
    """Return a copy of ``mat`` with every row and column holding a zero set to zero."""
    zero_rows = {i for i, row in enumerate(mat) if 0 in row}
    zero_cols = {j for row in mat for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(mat)
    ]


def spiral_order(mat: Matrix) -> list[int]:
    """Return the elements of ``mat`` in clockwise spiral order from the top-left."""
    if not mat or not mat[0]:
        return []
    top, bottom = 0, len(mat) - 1
    left, right = 0, len(mat[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(mat[top][left : right + 1])
        top += 1
        result.extend(mat[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(mat[bottom][j] for j in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(mat[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return result