import pytest

from algodrills.container import max_area, max_area_two_pointers


@pytest.mark.parametrize("func", [max_area, max_area_two_pointers])
@pytest.mark.parametrize(
    "height, want",
    [
        ([1, 8, 6, 2, 5, 4, 8, 3, 7], 49),
        ([1, 1], 1),
        ([], 0),
        ([5], 0),
        ([4, 3, 2, 1, 4], 16),
    ],
)
def test_max_area(func, height, want):
    assert func(height) == want