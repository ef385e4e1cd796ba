"""Grouping of words that are anagrams of one another."""

from __future__ import annotations

from collections.abc import Iterable


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Return the words grouped by their letters, groups in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())