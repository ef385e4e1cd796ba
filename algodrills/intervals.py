"""Merging of overlapping closed intervals."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the intervals merged where they overlap or touch, ordered by start."""
    merged: list[list[int]] = []
    for start, end in sorted((list(item) for item in intervals), key=lambda item: item[0]):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged