"""Conversion of a fraction to its decimal form, with repeating digits in brackets."""

from __future__ import annotations


def fraction_to_decimal(numerator: int, denominator: int) -> str:
    """Return numerator/denominator as a decimal string.

    A repeating part of the fraction is enclosed in parentheses, so 2/3 gives
    "0.(6)". Raises ZeroDivisionError when the denominator is zero.
    """
    if numerator % denominator == 0:
        return str(numerator // denominator)

    dividend = abs(numerator)
    divisor = abs(denominator)
    sign = "-" if (numerator < 0) != (denominator < 0) else ""
    head = f"{sign}{dividend // divisor}."

    fraction_digits: list[str] = []
    seen: dict[int, int] = {}
    remainder = dividend % divisor
    while remainder:
        if remainder in seen:
            start = seen[remainder]
            fixed = "".join(fraction_digits[:start])
            repeating = "".join(fraction_digits[start:])
            return f"{head}{fixed}({repeating})"
        seen[remainder] = len(fraction_digits)
        remainder *= 10
        fraction_digits.append(str(remainder // divisor))
        remainder %= divisor
    return head + "".join(fraction_digits)