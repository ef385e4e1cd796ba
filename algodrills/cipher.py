"""A substitution cipher keyed by a phrase, and a route transposition."""

from __future__ import annotations


def _key_letters(key: str) -> str:
    seen: set[str] = set()
    letters: list[str] = []
    for ch in key:
        if ch in seen:
            continue
        seen.add(ch)
        if "A" <= ch <= "Z" or "a" <= ch <= "z":
            letters.append(ch)
    return "".join(letters)


def substitute(message: str, key: str) -> str:
    """Encrypt message with the alphabet formed by the distinct letters of key.

    The first distinct letter replaces A and a, the second B and b, and so on;
    distinctness is case-sensitive. Other characters pass through unchanged.
    """
    letters = _key_letters(key)
    table: dict[int, str] = {}
    for i, ch in enumerate(letters.upper()):
        table[ord("A") + i] = ch
    for i, ch in enumerate(letters.lower()):
        table[ord("a") + i] = ch
    return message.translate(table)


def route(message: str, rows: int, cols: int) -> str:
    """Write message row by row into a rows x cols grid and read it column by column.

    Empty cells read as NUL characters; characters beyond the grid are dropped.
    """
    if rows < 0 or cols < 0:
        raise ValueError("rows and cols must not be negative")
    size = rows * cols
    cells = message[:size].ljust(size, "\0")
    grid = [cells[start:start + cols] for start in range(0, size, cols)] if cols else []
    return "".join("".join(column) for column in zip(*grid))