"""Letter combinations that a string of telephone keypad digits can spell."""

from __future__ import annotations

from itertools import product

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def letter_combinations(digits: str) -> list[str]:
    """Return every string the digits could spell, in keypad order.

    Digits without letters yield no combinations at all.
    """
    if not digits:
        return []
    letters = [_KEYPAD.get(d, "") for d in digits]
    return ["".join(combo) for combo in product(*letters)]