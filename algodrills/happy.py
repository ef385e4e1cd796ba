"""Happy numbers: repeatedly summing the squares of digits reaches 1."""

from __future__ import annotations


def next_number(n: int) -> int:
    """Return the sum of the squares of the decimal digits of n (0 for n <= 0)."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def digits(n: int) -> list[int]:
    """Return the decimal digits of n, least significant first.

    Zero gives [0] and a negative number gives an empty list.
    """
    if n == 0:
        return [0]
    values: list[int] = []
    while n > 0:
        n, digit = divmod(n, 10)
        values.append(digit)
    return values


def is_happy_floyd(n: int) -> bool:
    """Return whether n is happy, detecting cycles with Floyd's algorithm."""
    slow = n
    fast = next_number(n)
    while fast != 1 and slow != fast:
        slow = next_number(slow)
        fast = next_number(next_number(fast))
    return fast == 1


def is_happy_seen(n: int) -> bool:
    """Return whether n is happy, remembering the small values already visited."""
    seen: set[int] = set()
    while n != 1:
        if n in seen:
            break
        # A value of 243 or more always drops below itself, so it cannot recur.
        if n < 243:
            seen.add(n)
        n = next_number(n)
    return n == 1


def is_happy_naive(n: int) -> bool:
    """Return whether n is happy, remembering every sum of squares produced."""
    if n < 0:
        return False
    seen: set[int] = set()
    while n != 1:
        total = sum(d * d for d in digits(n))
        if total in seen:
            break
        seen.add(total)
        n = total
    return n == 1