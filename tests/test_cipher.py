import pytest

from algodrills.cipher import route, substitute

KEY = "The quick onyx goblin, grabbing his sword, jumps over the lazy dwarf!"


def test_substitute():
    assert substitute("It was all a dream.", KEY) == "Od ptw txx t qsutg."


def test_substitute_keeps_other_characters():
    assert substitute("123 !?", KEY) == "123 !?"


def test_substitute_alphabet_key_is_identity():
    assert substitute("Hello, World", "abcdefghijklmnopqrstuvwxyz") == "Hello, World"


def test_route_full_grid():
    assert route("abcdef", 2, 3) == "adbecf"


def test_route_pads_empty_cells():
    assert route("abcd", 2, 3) == "adb\0c\0"


def test_route_drops_overflow():
    assert route("abcdefg", 2, 3) == "adbecf"


def test_route_negative_size():
    with pytest.raises(ValueError):
        route("abc", -1, 3)