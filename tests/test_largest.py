import pytest

from algodrills.largest import count_digits, largest_number, largest_number_by_digits

CASES = [
    ([999999998, 999999997, 999999999], "999999999999999998999999997"),
    ([0, 9, 8, 7, 6, 5, 4, 3, 2, 1], "9876543210"),
    ([0, 0], "0"),
    ([10, 2], "210"),
    ([3, 30, 34, 5, 9], "9534330"),
]


@pytest.mark.parametrize(("values", "expected"), CASES)
def test_largest_number(values, expected):
    assert largest_number(values) == expected


@pytest.mark.parametrize(("values", "expected"), CASES)
def test_largest_number_by_digits(values, expected):
    assert largest_number_by_digits(values) == expected


@pytest.mark.parametrize(("value", "expected"), [(0, 1), (7, 1), (12345, 5), (-15, 2)])
def test_count_digits(value, expected):
    assert count_digits(value) == expected


def test_input_left_unchanged():
    values = [3, 30, 34, 5, 9]
    largest_number(values)
    largest_number_by_digits(values)
    assert values == [3, 30, 34, 5, 9]