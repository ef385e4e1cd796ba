"""Classic algorithm exercises on numbers, strings, permutations and union-find."""

__version__ = "0.1.0"