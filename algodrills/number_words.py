"""English words for integers from 0 to 999."""

from __future__ import annotations

__all__ = ["digit_word", "digits", "number_words"]

_ONES = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_TEENS = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "fourty", "fifty", "sixty", "seventy", "eighty", "ninety")


def digit_word(n: int) -> str:
    """Return the word for a single digit, or "wat" for anything else."""
    if 0 <= n < len(_ONES):
        return _ONES[n]
    return "wat"


def digits(n: int) -> list[int]:
    """Return the decimal digits of n, least significant first; [] for negatives."""
    if n == 0:
        return [0]
    if n < 0:
        return []
    values: list[int] = []
    while n > 0:
        n, digit = divmod(n, 10)
        values.append(digit)
    return values


def number_words(n: int) -> str:
    """Return n, between 0 and 999, written out in English words."""
    ds = list(reversed(digits(n)))
    words: list[str] = []
    for i, digit in enumerate(ds):
        place = len(ds) - i
        if place == 3:
            words += [_ONES[digit], "hundred"]
            if ds[i + 1] == 0 and ds[i + 2] == 0:
                break
        elif place == 2:
            if digit == 0:
                continue
            if digit == 1:
                words.append(_TEENS[ds[i + 1]])
                break
            words.append(_TENS[digit])
        elif place == 1:
            words.append(digit_word(digit))
    return " ".join(words)