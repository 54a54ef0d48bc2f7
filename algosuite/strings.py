"""String puzzles: word order, runs, pangrams, odd prefixes, vowels and scores."""

from __future__ import annotations

from itertools import groupby, pairwise
from string import ascii_lowercase

_VOWELS = frozenset("aeiouAEIOU")


def reverse_words(s: str) -> str:
    """Return the words of ``s`` in reverse order, separated by single spaces."""
    return " ".join(reversed(s.split()))


def max_power(s: str) -> int:
    """Return the length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(s)), default=0)


def check_if_pangram(s: str) -> bool:
    """Tell whether ``s`` holds every lowercase English letter."""
    return set(ascii_lowercase) <= set(s)


def largest_odd_number(num: str) -> str:
    """Return the longest prefix of the digit string ``num`` that ends in an odd digit."""
    return num.rstrip("02468")


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other characters in place."""
    vowels = [ch for ch in s if ch in _VOWELS]
    return "".join(vowels.pop() if ch in _VOWELS else ch for ch in s)


def score_of_string(s: str) -> int:
    """Sum the absolute differences of code points of adjacent characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in pairwise(s))