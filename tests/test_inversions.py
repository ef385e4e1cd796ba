import pytest

from algodrills.inversions import count_inversions, sort_and_count


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([1, 5, 7, 2, 3, 6], 5),
        ([1, 2, 4, 5, 3, 6], 2),
        ([1, 2, 3, 4, 5, 6, 7, 8], 0),
        ([1, 2, 3, 4, 5], 0),
        ([1, 2, 4, 3, 5, 6], 1),
        ([1, 2, 3, 4, 6, 5, 7], 1),
        ([2, 1, 6, 5, 3, 4], 6),
        ([1, 3, 5, 2, 4, 6], 3),
        ([1, 5, 3, 2, 4], 4),
        ([5, 4, 3, 2, 1], 10),
        ([1, 6, 3, 2, 4, 5], 5),
        ([9, 12, 3, 1, 6, 8, 2, 5, 14, 13, 11, 7, 10, 4, 0], 56),
        (
            [37, 7, 2, 14, 35, 47, 10, 24, 44, 17, 34, 11, 16, 48, 1, 39, 6, 33,
             43, 26, 40, 4, 28, 5, 38, 41, 42, 12, 13, 21, 29, 18, 3, 19, 0, 32,
             46, 27, 31, 25, 15, 36, 20, 8, 9, 49, 22, 23, 30, 45],
            590,
        ),
        (
            [4, 80, 70, 23, 9, 60, 68, 27, 66, 78, 12, 40, 52, 53, 44, 8, 49, 28,
             18, 46, 21, 39, 51, 7, 87, 99, 69, 62, 84, 6, 79, 67, 14, 98, 83, 0,
             96, 5, 82, 10, 26, 48, 3, 2, 15, 92, 11, 55, 63, 97, 43, 45, 81, 42,
             95, 20, 25, 74, 24, 72, 91, 35, 86, 19, 75, 58, 71, 47, 76, 59, 64,
             93, 17, 50, 56, 94, 90, 89, 32, 37, 34, 65, 1, 73, 41, 36, 57, 77,
             30, 22, 13, 29, 38, 16, 88, 61, 31, 85, 33, 54],
            2372,
        ),
    ],
)
def test_count_inversions(values, expected):
    assert count_inversions(values) == expected


def test_sort_and_count_returns_sorted():
    ordered, inversions = sort_and_count([5, 4, 3, 2, 1])
    assert ordered == [1, 2, 3, 4, 5]
    assert inversions == 10


def test_empty_has_no_inversions():
    assert sort_and_count([]) == ([], 0)


def test_input_left_unchanged():
    values = [3, 1, 2]
    count_inversions(values)
    assert values == [3, 1, 2]