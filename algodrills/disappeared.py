"""Numbers in 1..n that are missing from a list of length n."""

from __future__ import annotations

from collections.abc import Sequence


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return the values in 1..len(nums) that do not occur in nums.

    Every value must lie in 1..len(nums).
    """
    marks = list(nums)
    for value in nums:
        index = abs(value) - 1
        if marks[index] > 0:
            marks[index] = -marks[index]
    return [i for i, value in enumerate(marks, start=1) if value > 0]


def find_disappeared_numbers_bitmask(nums: Sequence[int]) -> list[int]:
    """Return the values in 1..len(nums) missing from nums, using a bit mask."""
    mask = 0
    for value in nums:
        mask |= 1 << value
    return [i for i in range(1, len(nums) + 1) if not mask & (1 << i)]