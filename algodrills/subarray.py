"""Maximum length of a subarray common to two sequences."""

from __future__ import annotations

from collections.abc import Sequence


def find_length(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the length of the longest contiguous run present in both a and b."""
    best = 0
    previous = [0] * (len(b) + 1)
    for x in a:
        current = [0] * (len(b) + 1)
        for j, y in enumerate(b, start=1):
            if x == y:
                current[j] = previous[j - 1] + 1
                best = max(best, current[j])
        previous = current
    return best