"""Generation of every well-formed string of parentheses."""

from __future__ import annotations


def generate_parentheses(n: int) -> list[str]:
    """Return all balanced strings of n pairs of parentheses."""
    if n == 0:
        return []
    results: list[str] = []

    def helper(opened: int, closed: int, current: str) -> None:
        if len(current) == n * 2:
            results.append(current)
            return
        if opened < n:
            helper(opened + 1, closed, current + "(")
        if closed < opened:
            helper(opened, closed + 1, current + ")")

    helper(0, 0, "")
    return results