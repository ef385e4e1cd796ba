"""Multiplication and addition of integers held as decimal strings."""

from __future__ import annotations


def _pad(x: str, y: str) -> tuple[str, str]:
    width = max(len(x), len(y))
    return x.rjust(width, "0"), y.rjust(width, "0")


def _split(x: str, y: str) -> tuple[int, int, int, int, int, int]:
    """Split padded x and y into high and low halves.

    Returns the four halves, the number of digits n and the width of the
    low half.
    """
    n = len(x)
    half = n // 2
    low_width = n - half
    return int(x[:half]), int(x[half:]), int(y[:half]), int(y[half:]), n, low_width


def karatsuba(x: str, y: str) -> str:
    """Return the product of two non-negative decimal strings by Karatsuba's method."""
    x, y = _pad(x, y)
    if len(x) == 1:
        return str(int(x) * int(y))
    a, b, c, d, _, low_width = _split(x, y)
    ac = int(karatsuba(str(a), str(c)))
    bd = int(karatsuba(str(b), str(d)))
    pq = int(karatsuba(str(a + b), str(c + d)))
    middle = pq - ac - bd
    return str(ac * 10 ** (2 * low_width) + middle * 10**low_width + bd)


def multiply_recursive(x: str, y: str) -> str:
    """Return the product of two non-negative decimal strings using four sub-products."""
    x, y = _pad(x, y)
    if len(x) == 1:
        return str(int(x) * int(y))
    a, b, c, d, _, low_width = _split(x, y)
    ac = int(multiply_recursive(str(a), str(c)))
    ad = int(multiply_recursive(str(a), str(d)))
    bc = int(multiply_recursive(str(b), str(c)))
    bd = int(multiply_recursive(str(b), str(d)))
    return str(ac * 10 ** (2 * low_width) + (ad + bc) * 10**low_width + bd)


def split_sign(x: str) -> tuple[str, str]:
    """Split a leading sign from x, returning ("+" or "-", the rest).

    A string of one character is never treated as a sign.
    """
    if len(x) > 1 and x[0] in "+-":
        return x[0], x[1:]
    return "+", x


def add(x: str, y: str) -> str:
    """Return the sum of two signed decimal strings, digit by digit.

    Results that come out negative are not handled reliably.
    """
    sign_x, x = split_sign(x)
    sign_y, y = split_sign(y)
    x, y = _pad(x, y)

    carry = 0
    reversed_digits: list[str] = []
    for digit_x, digit_y in zip(reversed(x), reversed(y)):
        a = int(sign_x + digit_x)
        b = int(sign_y + digit_y)
        if a < b:
            a, b = b, a
        partial = carry + a + b
        partial_sign, partial_digits = split_sign(str(partial))
        if partial_sign == "-" and carry + a > b:
            carry = -1
            reversed_digits.append(partial_digits[0])
        elif len(partial_digits) > 1:
            carry = int(partial_digits[0])
            reversed_digits.append(partial_digits[1])
        else:
            carry = 0
            reversed_digits.append(partial_digits[0])

    total = "".join(reversed(reversed_digits))
    if carry:
        total = str(carry) + total
    total_sign, total = split_sign(total)
    total = total.lstrip("0")
    if not total:
        return "0"
    return "-" + total if total_sign == "-" else total