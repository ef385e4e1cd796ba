"""In-place sorting of a list holding only the values 0, 1 and 2."""

from __future__ import annotations


def sort_colors(nums: list[int]) -> None:
    """Sort nums in place by counting each colour."""
    counts = [0, 0, 0]
    for value in nums:
        counts[value] += 1
    nums[:] = [colour for colour, count in enumerate(counts) for _ in range(count)]


def sort_colors_pointers(nums: list[int]) -> None:
    """Sort nums in place in one pass, as in the Dutch national flag problem."""
    zeros_end = 0
    twos_start = len(nums) - 1
    current = 0
    while current <= twos_start:
        if nums[current] == 0:
            nums[current], nums[zeros_end] = nums[zeros_end], nums[current]
            zeros_end += 1
            current += 1
        elif nums[current] == 2:
            nums[current], nums[twos_start] = nums[twos_start], nums[current]
            twos_start -= 1
        else:
            current += 1