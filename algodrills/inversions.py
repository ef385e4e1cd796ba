"""Counting inversions in a sequence by merge sort."""

from __future__ import annotations

from collections.abc import Sequence


def count_inversions(nums: Sequence[int]) -> int:
    """Return the number of pairs i < j with nums[i] >= nums[j] found by the merge."""
    _, inversions = sort_and_count(nums)
    return inversions


def sort_and_count(nums: Sequence[int]) -> tuple[list[int], int]:
    """Return nums sorted together with the number of inversions counted."""
    items = list(nums)
    if len(items) <= 1:
        return items, 0
    middle = len(items) // 2
    left, left_inversions = sort_and_count(items[:middle])
    right, right_inversions = sort_and_count(items[middle:])
    merged, split_inversions = _merge_and_count(left, right)
    return merged, left_inversions + right_inversions + split_inversions


def _merge_and_count(left: list[int], right: list[int]) -> tuple[list[int], int]:
    merged: list[int] = []
    split = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            # Every element still waiting on the left is larger than this one.
            split += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, split