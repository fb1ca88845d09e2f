"""String problems: binary addition, anagrams, parsing and pattern matching."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable
from itertools import takewhile

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
_DIGITS = "0123456789"


def add_binary(a: str, b: str) -> str:
    """Return the sum of two binary numerals as a binary numeral without leading zeros.

    Raises:
        ValueError: if either string holds a character other than 0 or 1.
    """
    for numeral in (a, b):
        if any(ch not in "01" for ch in numeral):
            raise ValueError(f"not a binary numeral: {numeral!r}")
    total = int(a or "0", 2) + int(b or "0", 2)
    return format(total, "b")


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other.

    Groups are ordered by their sorted letters; words keep their input order.
    """
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in words:
        groups["".join(sorted(word))].append(word)
    return [groups[key] for key in sorted(groups)]


def atoi(s: str) -> int:
    """Parse a leading, optionally signed decimal integer, clamped to 32 bits.

    Leading spaces are skipped and parsing stops at the first non-digit;
    0 is returned when no digits follow.
    """
    rest = s.lstrip(" ")
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    number = 0
    for ch in takewhile(lambda c: c in _DIGITS, rest):
        digit = int(ch)
        if number > (INT_MAX - digit) // 10:
            return INT_MAX if sign == 1 else INT_MIN
        number = number * 10 + digit
    return sign * number


def _prefix_function(s: str) -> list[int]:
    """Return, for each prefix of ``s``, the length of its longest proper border."""
    lps = [0] * len(s)
    for i in range(1, len(s)):
        j = lps[i - 1]
        while j and s[i] != s[j]:
            j = lps[j - 1]
        if s[i] == s[j]:
            j += 1
        lps[i] = j
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return the start index of every occurrence of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        return []
    lps = _prefix_function(pattern)
    matches: list[int] = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = lps[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            matches.append(i - j + 1)
            j = lps[j - 1]
    return matches


def min_chars_for_palindrome(s: str) -> int:
    """Return how many characters must be added at the front to make ``s`` a palindrome."""
    combined = s + "$" + s[::-1]
    return len(s) - _prefix_function(combined)[-1]


def first_non_repeating(s: str) -> str:
    """Return the first character occurring exactly once in ``s``, or "$" if none does."""
    counts = Counter(s)
    return next((ch for ch in s if counts[ch] == 1), "$")


def are_rotations(s1: str, s2: str) -> bool:
    """Return True if ``s2`` occurs within ``s1`` repeated twice."""
    return s2 in s1 + s1