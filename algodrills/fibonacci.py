"""Fibonacci numbers by memoised recursion and by tabulation."""

from __future__ import annotations

_memo: dict[int, int] = {0: 0, 1: 1, 2: 1}


def fib_memo(n: int) -> int:
    """Return the nth Fibonacci number, top down with a shared cache."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n not in _memo:
        _memo[n] = fib_memo(n - 1) + fib_memo(n - 2)
    return _memo[n]


def fib_bottom_up(n: int) -> int:
    """Return the nth Fibonacci number, building the table from 0 up."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    table = [0] * (n + 1)
    for i in range(n + 1):
        if i == 0:
            table[i] = 0
        elif i <= 2:
            table[i] = 1
        else:
            table[i] = table[i - 1] + table[i - 2]
    return table[n]