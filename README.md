# algodrills

Classic algorithm exercises as small, plain Python functions. Each module
covers one family of problems, often in more than one way, so the approaches
can be compared side by side. There are no dependencies beyond the standard
library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

Numbers:

- `algodrills.fibonacci`: `fib_memo` (recursion with a shared cache) and
  `fib_bottom_up` (tabulation). Both raise `ValueError` for negative `n`.
- `algodrills.fraction`: `fraction_to_decimal(numerator, denominator)`. A
  repeating part is put in parentheses, so `2/3` gives `"0.(6)"`.
- `algodrills.happy`: `next_number`, `digits`, and three happy-number checks:
  `is_happy_floyd`, `is_happy_seen`, `is_happy_naive`.
- `algodrills.inversions`: `count_inversions` and `sort_and_count`, both by
  merge sort.
- `algodrills.largest`: `largest_number` and `largest_number_by_digits`
  return the largest number that can be formed by concatenating the inputs.
  `count_digits` is also available.
- `algodrills.multiplication`: `karatsuba` and `multiply_recursive` multiply
  non-negative decimal strings. `add` adds signed decimal strings digit by
  digit and does not handle negative results reliably. `split_sign` is also
  available.
- `algodrills.nondecreasing`: `check_possibility` and
  `check_possibility_locate` report whether changing at most one element makes
  a sequence non-decreasing.
- `algodrills.number_words`: `number_words` writes out 0 to 999 in English.
  `digit_word` and `digits` are also available.
- `algodrills.primes`: `count_primes`, `make_sieve` (the primes below `n`)
  and `is_prime`.
- `algodrills.rotated_search`: `search` in a rotated sorted list, built on
  `find_rotation` and `binary_search`.
- `algodrills.container`: `max_area` and `max_area_two_pointers`.
- `algodrills.colors`: `sort_colors` and `sort_colors_pointers` sort a list
  of 0s, 1s and 2s in place.
- `algodrills.intervals`: `merge_intervals`.
- `algodrills.subarray`: `find_length`, the longest common contiguous run.
- `algodrills.disappeared`: `find_disappeared_numbers` and
  `find_disappeared_numbers_bitmask`.
- `algodrills.sum_zero`: `sum_zero(n)`, `n` distinct integers that sum to
  zero.

Permutations and structures:

- `algodrills.permutations`: `permute_heap` and `permute_heap_recursive`
  (Heap's algorithm), `permute_backtrack` and `permute_swap` (swap and
  backtrack), and `permute_backtrack_traced`, which also writes every swap to
  a stream (standard output by default) with ANSI colours from `swap_render`.
  `factorial` is also available.
- `algodrills.parentheses`: `generate_parentheses`.
- `algodrills.union_find`: `UnionFind`, with weighted union and path
  compression. Its `root`, `find` and `union` methods raise
  `OutOfBoundsError`, a subclass of `IndexError`, for an index outside
  `0..n-1`.

Strings:

- `algodrills.anagram`: `is_anagram` (any Unicode) and `is_anagram_lowercase`
  (only `a` to `z`; raises `ValueError` for other characters).
- `algodrills.anagram_groups`: `group_anagrams`, groups in order of first
  appearance.
- `algodrills.isomorphic`: `is_isomorphic`.
- `algodrills.history`: `find_contiguous_history`, the longest run of entries
  shared by two histories.
- `algodrills.cipher`: `substitute(message, key)`, a substitution cipher
  whose alphabet is the distinct letters of `key`, and
  `route(message, rows, cols)`, which writes the message into a grid by rows
  and reads it by columns.
- `algodrills.palindrome`: `longest_palindrome`, with the helpers
  `find_center` and `expand_from_center`.
- `algodrills.phone`: `letter_combinations` for telephone keypad digits.
- `algodrills.word_reverse`: `reverse_each_word` and `reverse_word_order`.

## Examples

```python
from algodrills.fraction import fraction_to_decimal
from algodrills.union_find import UnionFind, OutOfBoundsError
from algodrills.cipher import substitute

fraction_to_decimal(4, 333)   # "0.(012)"

uf = UnionFind(10)
uf.union(0, 7)
uf.union(7, 1)
uf.find(0, 1)                 # True

try:
    uf.root(50)
except OutOfBoundsError as err:
    print(err.index, err.lower, err.upper)   # 50 0 10

key = "The quick onyx goblin, grabbing his sword, jumps over the lazy dwarf!"
substitute("It was all a dream.", key)       # "Od ptw txx t qsutg."
```

## What it does not do

This is a library only. It has no command-line program, and nothing reads
input or saves results. You import the functions and call them.