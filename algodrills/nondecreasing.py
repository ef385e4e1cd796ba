"""Whether a sequence can be made non-decreasing by changing at most one element."""

from __future__ import annotations

from collections.abc import Sequence


def check_possibility(nums: Sequence[int]) -> bool:
    """Return whether one change suffices, by repairing and rescanning."""
    values = list(nums)
    n = len(values)
    if n == 1:
        return True
    last = n - 1
    changes = 0
    i = 1
    while i < n:
        has_next = i != last
        if values[i - 1] > values[i] or (has_next and values[i + 1] < values[i]):
            changes += 1
            if changes > 1:
                return False
            if i == 1 and values[0] > values[1]:
                values[0] = values[1]
            elif values[i - 1] > values[i] and (not has_next or values[i + 1] > values[i]):
                values[i] = values[i - 1]
                if has_next and values[i] < values[i + 1]:
                    values[i] = values[i + 1]
                if values[i - 1] > values[i] or (has_next and values[i] > values[i + 1]):
                    return False
            elif has_next and values[i + 1] < values[i]:
                if values[i - 1] < values[i + 1]:
                    values[i] = values[i - 1]
                else:
                    values[i + 1] = values[i]
            i = 1
            continue
        i += 1
    return changes <= 1


def check_possibility_locate(nums: Sequence[int]) -> bool:
    """Return whether one change suffices, by locating the single descent."""
    problem: int | None = None
    for index, (current, following) in enumerate(zip(nums, nums[1:])):
        if current > following:
            if problem is not None:
                return False
            problem = index
    if problem is None:
        return True
    p = problem
    return (
        p == 0
        or p == len(nums) - 2
        or nums[p - 1] <= nums[p + 1]
        or nums[p] <= nums[p + 2]
    )