"""Permutations of a sequence by Heap's algorithm and by backtracking."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

_RESET = "\x1b[0m"
_GREEN = "32"
_BLACK = "30"
_RED = "31"
_LIGHT_RED = "91"
_LIGHT_GREEN = "92"
_WHITE_ON_BLACK = "37;40"


def _paint(code: str, value: object) -> str:
    return f"\x1b[{code}m{value}{_RESET}"


def _render_list(values: Iterable[object]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def factorial(n: int) -> int:
    """Return n! (1 for n <= 0)."""
    count = 1
    for i in range(1, n + 1):
        count *= i
    return count


def permute_heap(nums: Iterable[int]) -> list[list[int]]:
    """Return every permutation using the iterative form of Heap's algorithm."""
    items = list(nums)
    n = len(items)
    perms = [list(items)]
    stack = [0] * n
    i = 0
    while i < n:
        if stack[i] < i:
            j = 0 if i % 2 == 0 else stack[i]
            items[j], items[i] = items[i], items[j]
            perms.append(list(items))
            stack[i] += 1
            i = 0
        else:
            stack[i] = 0
            i += 1
    return perms


def permute_heap_recursive(nums: Iterable[int]) -> list[list[int]]:
    """Return every permutation using the recursive form of Heap's algorithm."""
    items = list(nums)

    def generate(k: int) -> Iterator[list[int]]:
        if k <= 1:
            yield list(items)
            return
        yield from generate(k - 1)
        for i in range(k - 1):
            j = i if k % 2 == 0 else 0
            items[j], items[k - 1] = items[k - 1], items[j]
            yield from generate(k - 1)

    return list(generate(len(items)))


def _backtrack(items: list[int], first: int = 0) -> Iterator[list[int]]:
    n = len(items)
    if first == n:
        yield list(items)
        return
    for i in range(first, n):
        items[first], items[i] = items[i], items[first]
        yield from _backtrack(items, first + 1)
        items[first], items[i] = items[i], items[first]


def permute_backtrack(nums: Iterable[int]) -> list[list[int]]:
    """Return every permutation by swapping each element into the first free slot."""
    return list(_backtrack(list(nums)))


def permute_swap(nums: Iterable[int]) -> list[list[int]]:
    """Return every permutation by swap-and-backtrack, collecting into one list."""
    perms: list[list[int]] = []
    items = list(nums)

    def walk(first: int) -> None:
        if first == len(items):
            perms.append(list(items))
            return
        for i in range(first, len(items)):
            items[first], items[i] = items[i], items[first]
            walk(first + 1)
            items[first], items[i] = items[i], items[first]

    walk(0)
    return perms


def swap_render(nums: Iterable[int], a: int, b: int, before: bool) -> str:
    """Render nums with the positions a and b coloured to show a swap."""
    if a == b:
        a_code = b_code = _RED
    elif before:
        a_code, b_code = _LIGHT_GREEN, _LIGHT_RED
    else:
        a_code, b_code = _LIGHT_RED, _LIGHT_GREEN
    parts = []
    for i, value in enumerate(nums):
        if i == a:
            parts.append(_paint(a_code, value))
        elif i == b:
            parts.append(_paint(b_code, value))
        else:
            parts.append(str(value))
    return "[" + " ".join(parts) + "]"


def permute_backtrack_traced(
    nums: Iterable[int], out: TextIO | None = None
) -> list[list[int]]:
    """Return every permutation by backtracking, writing each swap to out."""
    stream = out if out is not None else sys.stdout
    items = list(nums)
    n = len(items)
    stream.write(_paint(_GREEN, "first "))
    stream.write(_paint(_BLACK, "value "))
    stream.write(_paint(_RED, "i "))
    stream.write(_paint(_WHITE_ON_BLACK, "output") + "\n")
    stream.write(f"N: {n} Nums: {_render_list(items)}\n")

    perms: list[list[int]] = []

    def walk(first: int) -> None:
        if first == n:
            perms.append(list(items))
            return
        indent = "\t" * (first + 2)
        for i in range(first, n):
            stream.write(f"{indent}{swap_render(items, first, i, True)} -> ")
            items[first], items[i] = items[i], items[first]
            stream.write(f"{swap_render(items, first, i, False)}\n")
            walk(first + 1)
            items[first], items[i] = items[i], items[first]

    walk(0)
    return perms