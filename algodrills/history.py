"""The longest run of visits shared by two browsing histories."""

from __future__ import annotations

from collections.abc import Sequence


def find_contiguous_history(user_a: Sequence[str], user_b: Sequence[str]) -> list[str]:
    """Return the longest contiguous run of entries found in both histories.

    Where several runs are equally long, the one ending first in user_a wins.
    """
    best = 0
    best_end = 0
    previous = [0] * (len(user_b) + 1)
    for i, entry_a in enumerate(user_a, start=1):
        current = [0] * (len(user_b) + 1)
        for j, entry_b in enumerate(user_b, start=1):
            if entry_a == entry_b:
                current[j] = previous[j - 1] + 1
                if current[j] > best:
                    best = current[j]
                    best_end = i
        previous = current
    if best <= 0:
        return []
    return list(user_a[best_end - best:best_end])