import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.strings import (
    add_binary,
    are_rotations,
    atoi,
    first_non_repeating,
    group_anagrams,
    kmp_search,
    min_chars_for_palindrome,
)

letters = st.text(alphabet="abcd", max_size=20)


@given(st.integers(0, 10**6), st.integers(0, 10**6), st.integers(0, 5))
def test_add_binary_adds(x, y, padding):
    result = add_binary("0" * padding + format(x, "b"), format(y, "b"))
    assert int(result, 2) == x + y
    assert result == "0" or not result.startswith("0")


def test_add_binary_of_zeros():
    assert add_binary("000", "0") == "0"


def test_add_binary_rejects_other_digits():
    with pytest.raises(ValueError):
        add_binary("102", "1")


def test_group_anagrams_known_example():
    words = ["act", "god", "cat", "dog", "tac"]
    assert group_anagrams(words) == [["act", "cat", "tac"], ["god", "dog"]]


@given(st.lists(st.text(alphabet="abc", max_size=4), max_size=20))
def test_group_anagrams_partitions_words(words):
    groups = group_anagrams(words)
    assert sorted(w for group in groups for w in group) == sorted(words)
    keys = ["".join(sorted(group[0])) for group in groups]
    assert keys == sorted(set(keys))
    for group in groups:
        assert len({"".join(sorted(w)) for w in group}) == 1
        assert group == [w for w in words if sorted(w) == sorted(group[0])]


@given(st.integers(-(2**31) + 1, 2**31 - 1), st.integers(0, 4))
def test_atoi_round_trip(n, spaces):
    assert atoi(" " * spaces + str(n)) == n
    assert atoi(f"{n}abc") == n


def test_atoi_plus_sign():
    assert atoi("+7") == 7


def test_atoi_clamps_overflow():
    assert atoi("99999999999") == 2147483647
    assert atoi("-99999999999") == -2147483648


def test_atoi_without_digits():
    assert atoi("abc") == 0


@given(st.text(alphabet="ab", min_size=1, max_size=4), letters, letters)
def test_kmp_search_finds_inserted_pattern(pattern, prefix, suffix):
    text = prefix + pattern + suffix
    found = kmp_search(pattern, text)
    assert len(prefix) in found
    assert found == sorted(set(found))
    for index in found:
        assert text.startswith(pattern, index)


@given(st.text(alphabet="ab", min_size=1, max_size=4))
def test_kmp_search_overlapping_repeats(pattern):
    text = pattern * 3
    found = kmp_search(pattern, text)
    assert {0, len(pattern), 2 * len(pattern)} <= set(found)


def test_kmp_search_empty_pattern():
    assert kmp_search("", "abc") == []


@given(letters)
def test_min_chars_makes_palindrome(s):
    added = min_chars_for_palindrome(s)
    candidate = s[len(s) - added:][::-1] + s
    assert candidate == candidate[::-1]
    assert added <= max(len(s) - 1, 0)


@given(letters)
def test_min_chars_of_palindrome_is_zero(s):
    assert min_chars_for_palindrome(s + s[::-1]) == 0


@given(letters)
def test_first_non_repeating_is_first_unique(s):
    result = first_non_repeating(s)
    if result == "$":
        assert all(s.count(ch) > 1 for ch in s)
    else:
        assert s.count(result) == 1
        assert all(s.count(ch) > 1 for ch in s[: s.index(result)])


@given(letters)
def test_first_non_repeating_of_doubled_string(s):
    assert first_non_repeating(s + s) == "$"


@given(letters, st.integers(0, 20))
def test_rotation_is_recognised(s, k):
    k = k % (len(s) or 1)
    assert are_rotations(s, s[k:] + s[:k]) is True


def test_non_rotation_is_rejected():
    assert are_rotations("abc", "acb") is False