"""The largest number formed by concatenating a list of non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key


def count_digits(i: int) -> int:
    """Return the number of decimal digits in i (1 for zero, sign ignored)."""
    return len(str(abs(i)))


def _concat_before(a: int, b: int) -> bool:
    try:
        return int(f"{a}{b}") > int(f"{b}{a}")
    except ValueError:
        return False


def _by_concatenation(a: int, b: int) -> int:
    if _concat_before(a, b):
        return -1
    if _concat_before(b, a):
        return 1
    return 0


def _by_digits(a: int, b: int) -> int:
    ab = a * 10 ** count_digits(b) + b
    ba = b * 10 ** count_digits(a) + a
    if ab > ba:
        return -1
    if ba > ab:
        return 1
    return 0


def _join(ordered: Iterable[int]) -> str:
    return "".join(str(n) for n in ordered).lstrip("0") or "0"


def largest_number(nums: Iterable[int]) -> str:
    """Return the largest number, ordering by comparing joined decimal strings."""
    return _join(sorted(nums, key=cmp_to_key(_by_concatenation)))


def largest_number_by_digits(nums: Iterable[int]) -> str:
    """Return the largest number, ordering by arithmetic on digit counts."""
    return _join(sorted(nums, key=cmp_to_key(_by_digits)))