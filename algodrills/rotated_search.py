"""Search in a sorted list that has been rotated about an unknown pivot."""

from __future__ import annotations

from collections.abc import Sequence


def find_rotation(nums: Sequence[int], left: int, right: int) -> int:
    """Return the index of the smallest element of nums[left:right + 1]."""
    while left < right:
        mid = (left + 1 + right) // 2
        if nums[mid - 1] > nums[mid]:
            return mid
        if nums[mid] > nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return left


def binary_search(nums: Sequence[int], item: int, low: int, high: int) -> int:
    """Return the index of item in the sorted nums[low:high + 1], or -1."""
    while high > low:
        mid = (low + high) // 2
        if item == nums[mid]:
            return mid
        if item > nums[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return low if nums[low] == item else -1


def search(nums: Sequence[int], target: int) -> int:
    """Return the index of target in the rotated sorted nums, or -1."""
    if not nums:
        return -1
    last = len(nums) - 1
    pivot = find_rotation(nums, 0, last)
    if nums[pivot] == target:
        return pivot
    if pivot > 0 and nums[pivot - 1] >= target > nums[last]:
        return binary_search(nums, target, 0, pivot)
    return binary_search(nums, target, pivot, last)