import pytest

from algodrills.rotated_search import binary_search, find_rotation, search


@pytest.mark.parametrize(
    "nums, want",
    [
        ([5, 6, 7, 8, 0, 1, 2, 4], 4),
        ([3, 4, 5, 6, 0, 1, 2], 4),
        ([4, 5, 6, 7, 8, 0, 1, 2], 5),
        ([4], 0),
        ([], 0),
        ([0, 1, 2], 0),
        ([0, 1, 2, 4], 0),
        ([4, 0, 1, 2], 1),
    ],
)
def test_find_rotation(nums, want):
    assert find_rotation(nums, 0, len(nums) - 1) == want


@pytest.mark.parametrize(
    "nums, target, want",
    [
        ([5, 1, 3], 3, 2),
        ([1], 0, -1),
        ([1, 3, 4], 0, -1),
        ([3, 1], 3, 0),
        ([7, 8, 1, 3, 4, 5, 6], 0, -1),
        ([4, 5, 6, 7, 0, 1, 2], 0, 4),
        ([4, 5, 6, 7, 0, 1, 2], 3, -1),
        ([], 3, -1),
    ],
)
def test_search(nums, target, want):
    assert search(nums, target) == want


def test_search_finds_every_element():
    nums = [15, 18, 22, 3, 5, 9, 12]
    for index, value in enumerate(nums):
        assert search(nums, value) == index


@pytest.mark.parametrize(
    "item, want",
    [(1, 0), (7, 3), (11, 5), (4, -1), (12, -1)],
)
def test_binary_search(item, want):
    nums = [1, 3, 5, 7, 9, 11]
    assert binary_search(nums, item, 0, len(nums) - 1) == want