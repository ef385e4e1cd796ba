"""Checks for whether two strings are anagrams of each other."""

from __future__ import annotations

from collections import Counter


def is_anagram_lowercase(s: str, t: str) -> bool:
    """Return whether s and t are anagrams, for strings of the letters a to z only.

    Raises ValueError when strings of equal length hold any other character.
    """
    if len(s.encode()) != len(t.encode()):
        return False
    for ch in s + t:
        if not "a" <= ch <= "z":
            raise ValueError(f"{ch!r} is not a lower-case letter from a to z")
    return Counter(s) == Counter(t)


def is_anagram(s: str, t: str) -> bool:
    """Return whether s and t hold the same characters, any Unicode allowed."""
    if len(s.encode()) != len(t.encode()):
        return False
    return Counter(s) == Counter(t)