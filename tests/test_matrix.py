import copy
from itertools import accumulate

from hypothesis import given
from hypothesis import strategies as st

from dsakit.matrix import (
    contains,
    rotate_anticlockwise,
    search_flattened,
    search_row_sorted,
    search_staircase,
    set_zeroes,
    spiral_order,
)

INTS = st.integers(-50, 50)


def _square_matrices():
    return st.integers(1, 5).flatmap(
        lambda n: st.lists(st.lists(INTS, min_size=n, max_size=n), min_size=n, max_size=n)
    )


def _matrices():
    return st.integers(1, 5).flatmap(
        lambda w: st.lists(st.lists(INTS, min_size=w, max_size=w), min_size=1, max_size=5)
    )


@st.composite
def _fully_sorted(draw):
    rows = draw(st.integers(1, 5))
    cols = draw(st.integers(1, 5))
    values = sorted(2 * v for v in draw(st.lists(INTS, min_size=rows * cols, max_size=rows * cols)))
    return [values[start : start + cols] for start in range(0, rows * cols, cols)]


@st.composite
def _row_sorted(draw):
    cols = draw(st.integers(1, 5))
    rows = draw(st.lists(st.lists(INTS, min_size=cols, max_size=cols), min_size=1, max_size=5))
    return [sorted(2 * v for v in row) for row in rows]


@st.composite
def _row_and_column_sorted(draw):
    steps = st.integers(0, 5)
    row_offsets = list(accumulate(draw(st.lists(steps, min_size=1, max_size=5))))
    col_offsets = list(accumulate(draw(st.lists(steps, min_size=1, max_size=5))))
    return [[2 * (r + c) for c in col_offsets] for r in row_offsets]


def test_rotate_small_example():
    assert rotate_anticlockwise([[1, 2], [3, 4]]) == [[2, 4], [1, 3]]


@given(_square_matrices())
def test_four_rotations_restore_original(mat):
    result = mat
    for _ in range(4):
        result = rotate_anticlockwise(result)
    assert result == mat


@given(_square_matrices())
def test_rotation_first_row_is_last_column(mat):
    original = copy.deepcopy(mat)
    rotated = rotate_anticlockwise(mat)
    assert rotated[0] == [row[-1] for row in mat]
    assert mat == original


@given(_matrices())
def test_contains_finds_every_value(mat):
    assert all(contains(mat, v) for row in mat for v in row)
    assert not contains(mat, max(max(row) for row in mat) + 1)


@given(_fully_sorted())
def test_search_flattened(mat):
    assert all(search_flattened(mat, v) for row in mat for v in row)
    assert not search_flattened(mat, mat[0][0] + 1)
    assert not search_flattened(mat, mat[-1][-1] + 2)


def test_search_flattened_empty():
    assert search_flattened([], 3) is False


@given(_row_sorted())
def test_search_row_sorted(mat):
    assert all(search_row_sorted(mat, v) for row in mat for v in row)
    assert not search_row_sorted(mat, mat[0][0] + 1)


@given(_row_and_column_sorted())
def test_search_staircase(mat):
    assert all(search_staircase(mat, v) for row in mat for v in row)
    assert not search_staircase(mat, mat[-1][-1] + 1)
    assert not search_staircase(mat, mat[0][0] - 1)


@given(_fully_sorted())
def test_staircase_agrees_on_fully_sorted(mat):
    for probe in range(mat[0][0] - 1, mat[-1][-1] + 2):
        assert search_staircase(mat, probe) == search_flattened(mat, probe)


@given(_matrices())
def test_set_zeroes_property(mat):
    original = copy.deepcopy(mat)
    result = set_zeroes(mat)
    assert mat == original
    for i, row in enumerate(result):
        for j, value in enumerate(row):
            crossed = 0 in mat[i] or 0 in [r[j] for r in mat]
            assert value == (0 if crossed else mat[i][j])


def test_set_zeroes_without_zero_is_unchanged():
    mat = [[1, 2], [3, 4]]
    assert set_zeroes(mat) == mat


def test_spiral_worked_example():
    mat = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
    assert spiral_order(mat) == [1, 2, 3, 4, 8, 12, 16, 15, 14, 13, 9, 5, 6, 7, 11, 10]


@given(_matrices())
def test_spiral_is_permutation_starting_with_first_row(mat):
    result = spiral_order(mat)
    assert sorted(result) == sorted(v for row in mat for v in row)
    assert result[: len(mat[0])] == list(mat[0])


def test_spiral_single_row_and_column():
    assert spiral_order([[7, 8, 9]]) == [7, 8, 9]
    assert spiral_order([[7], [8], [9]]) == [7, 8, 9]
    assert spiral_order([]) == []