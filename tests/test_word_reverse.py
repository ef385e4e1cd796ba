import pytest

from algodrills.word_reverse import reverse_each_word, reverse_word_order


@pytest.mark.parametrize(
    ("s", "want"),
    [
        ("hello world", "olleh dlrow"),
        ("hello world die", "olleh dlrow eid"),
        ("I love u", "I evol u"),
    ],
)
def test_reverse_each_word(s, want):
    assert reverse_each_word(s) == want


def test_reverse_each_word_twice_restores():
    text = "the quick  brown fox "
    assert reverse_each_word(reverse_each_word(text)) == text


@pytest.mark.parametrize(
    ("s", "want"),
    [
        ("the sky is blue", "blue is sky the"),
        ("  hello world!  ", "world! hello"),
        ("a good   example", "example good a"),
    ],
)
def test_reverse_word_order(s, want):
    assert reverse_word_order(s) == want


def test_reverse_word_order_blank():
    assert reverse_word_order("   ") == ""