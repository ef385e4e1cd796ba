import pytest

from algodrills.number_words import digit_word, digits, number_words


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3, "three"),
        (4, "four"),
        (2, "two"),
        (10, "ten"),
        (22, "twenty two"),
        (52, "fifty two"),
        (952, "nine hundred fifty two"),
        (0, "zero"),
        (100, "one hundred"),
        (200, "two hundred"),
        (210, "two hundred ten"),
        (211, "two hundred eleven"),
        (901, "nine hundred one"),
        (999, "nine hundred ninety nine"),
    ],
)
def test_number_words(value, expected):
    assert number_words(value) == expected


def test_digit_word():
    assert digit_word(7) == "seven"
    assert digit_word(12) == "wat"
    assert digit_word(-1) == "wat"


def test_digits():
    assert digits(952) == [2, 5, 9]


def test_negative_has_no_words():
    assert number_words(-4) == ""