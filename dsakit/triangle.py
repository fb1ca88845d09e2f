"""Classification of triangles by side lengths."""

from __future__ import annotations

from collections.abc import Iterable


def triangle_type(sides: Iterable[int]) -> str:
    """Return "equilateral", "isosceles", "scalene" or "none" for three side lengths.

    Raises:
        ValueError: if not exactly three sides are given.
    """
    ordered = sorted(sides)
    if len(ordered) != 3:
        raise ValueError("a triangle needs exactly three sides")
    a, b, c = ordered
    if a + b <= c:
        return "none"
    distinct = len({a, b, c})
    if distinct == 1:
        return "equilateral"
    if distinct == 2:
        return "isosceles"
    return "scalene"