"""Reversal of the letters within words and of the order of words."""

from __future__ import annotations


def reverse_each_word(s: str) -> str:
    """Reverse the characters of every space-separated word, keeping the spaces."""
    return " ".join(word[::-1] for word in s.split(" "))


def reverse_word_order(s: str) -> str:
    """Return the words of s in reverse order, joined by single spaces."""
    return " ".join(reversed(s.split()))