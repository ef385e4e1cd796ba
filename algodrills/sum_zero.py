"""Lists of distinct integers that sum to zero."""

from __future__ import annotations


def sum_zero(n: int) -> list[int]:
    """Return n distinct integers, symmetric about zero, whose sum is zero."""
    half = n // 2
    return [i for i in range(-half, half + 1) if i != 0 or n % 2 == 1]