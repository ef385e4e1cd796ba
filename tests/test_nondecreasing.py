import pytest

from algodrills.nondecreasing import check_possibility, check_possibility_locate

CASES = [
    ([4, 2, 3], True),
    ([4, 2, 1], False),
    ([3, 4, 2, 3], False),
    ([2, 3, 3, 2, 4], True),
    ([2, 3, 3, 2, 4, 4], True),
    ([-1, 4, 2, 3], True),
    ([-1, 0, 4, 2, 3], True),
    ([-1, 0, 4, 2, 2], True),
    ([-1, 0, 4], True),
]


@pytest.mark.parametrize(("values", "expected"), CASES)
def test_check_possibility(values, expected):
    assert check_possibility(values) is expected


@pytest.mark.parametrize(("values", "expected"), CASES)
def test_check_possibility_locate(values, expected):
    assert check_possibility_locate(values) is expected


def test_single_element_is_possible():
    assert check_possibility([5]) is True
    assert check_possibility_locate([5]) is True


def test_input_left_unchanged():
    values = [4, 2, 3]
    check_possibility(values)
    assert values == [4, 2, 3]