"""The container that holds the most water between two vertical lines."""

from __future__ import annotations

from collections.abc import Sequence


def max_area(height: Sequence[int]) -> int:
    """Return the largest area, trying every pair of lines."""
    best = 0
    for i, left in enumerate(height):
        for j in range(len(height) - 1, i, -1):
            best = max(best, min(left, height[j]) * (j - i))
    return best


def max_area_two_pointers(height: Sequence[int]) -> int:
    """Return the largest area, moving inwards from the lower of two ends."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best