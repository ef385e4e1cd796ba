"""The longest palindromic substring, found by expanding around centres."""

from __future__ import annotations


def find_center(s: str, first: int) -> int:
    """Return the last index of the run of characters equal to s[first]."""
    last = first + 1
    while last < len(s) and s[first] == s[last]:
        last += 1
    return last - 1


def expand_from_center(s: str, first: int, last: int) -> tuple[int, int]:
    """Widen s[first:last + 1] while its outer characters match; return the bounds."""
    prev, nxt = first - 1, last + 1
    while prev >= 0 and nxt < len(s) and s[prev] == s[nxt]:
        prev -= 1
        nxt += 1
    return prev + 1, nxt - 1


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of s, the earliest on ties."""
    if len(s) < 2:
        return s
    best_left = best_right = 0
    first = 0
    while first < len(s):
        center_right = find_center(s, first)
        left, right = expand_from_center(s, first, center_right)
        if right - left > best_right - best_left:
            best_left, best_right = left, right
        first = center_right + 1
    return s[best_left:best_right + 1]