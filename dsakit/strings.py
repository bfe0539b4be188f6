"""Small string helpers: case folding, reversal, palindromes and word counts."""

from __future__ import annotations

import string


def to_lower_case(ch: str) -> str:
    """Return the lower-case form of an ASCII upper-case letter.

    Any other single character is returned unchanged.
    """
    if len(ch) != 1:
        raise ValueError("expected a single character")
    if ch in string.ascii_uppercase:
        return chr(ord(ch) - ord("A") + ord("a"))
    return ch


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same in both directions, case-sensitively."""
    return text == text[::-1]


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def count_words(text: str) -> int:
    """Return the number of whitespace-separated words in ``text``."""
    return len(text.split())