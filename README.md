# bisectkit

Binary search routines for sorted sequences and for sorted sequences that
have been rotated at an unknown pivot. Most problems come in two or three
forms: a linear scan, a binary search in a loop and, for some, a recursive
binary search. The forms give the same answers on valid input. This makes the
scan useful as a reference when you check the search.

The functions accept any sequence of mutually comparable values. The command
line tool works on integers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `bisectkit.search`: membership in a sorted sequence

- `contains_recursive(nums, target)` returns whether `target` is present. It
  searches recursively.
- `contains_iterative(nums, target)` returns the same answer and searches in a loop.

```python
from bisectkit.search import contains_iterative

contains_iterative([1, 3, 5, 7], 5)   # True
contains_iterative([1, 3, 5, 7], 4)   # False
```

### `bisectkit.bounds`: lower bound, upper bound, insert position

- `lower_bound(nums, x)` returns the index of the first element `>= x`. If no
  such element exists, it returns `len(nums)`.
- `upper_bound(nums, x)` returns the index of the first element `> x`. If no
  such element exists, it returns `len(nums)`.
- `search_insert(nums, target)` returns the index where `target` is, or the
  index where it would be inserted to keep `nums` sorted.

Each of these also has a `_linear` variant (a scan) and a `_recursive` variant.

```python
from bisectkit.bounds import lower_bound, upper_bound, search_insert

lower_bound([1, 2, 2, 3], 2)    # 1
upper_bound([1, 2, 2, 3], 2)    # 3
search_insert([1, 3, 5, 6], 4)  # 2
```

### `bisectkit.occurrences`: floor, ceiling, ranges and counts

- `floor_value(nums, x)` returns the largest element `<= x`.
- `ceil_value(nums, x)` returns the smallest element `>= x`.
- `floor_and_ceil(nums, x)` returns `(floor, ceil)`.
- `floor_and_ceil_linear(nums, x)` returns `(floor, ceil)` by scanning.
- `first_occurrence(nums, target)` returns the index of the first `target`.
- `last_occurrence(nums, target)` returns the index of the last element
  `<= target`. When `target` is present, that is its last occurrence. Check
  for presence with `first_occurrence` first.
- `search_range(nums, target)` returns `(first, last)`, or `(-1, -1)` if the
  value is absent.
- `search_range_linear(nums, target)` returns the same pair by scanning.
- `count_occurrences(nums, target)` returns how often `target` occurs. It uses
  the standard `bisect` module.
- `count_bisect(nums, target)` returns the same count from the first and last
  index.
- `count_linear(nums, target)` returns the same count by scanning.

When a floor, ceiling or index does not exist, these functions return `-1`.
That sentinel cannot be told apart from a real floor or ceiling of `-1`.

```python
from bisectkit.occurrences import count_occurrences, floor_and_ceil, search_range

count_occurrences([1, 2, 2, 2, 3], 2)  # 3
floor_and_ceil([1, 2, 8, 10], 5)       # (2, 8)
search_range([5, 7, 7, 8, 8, 10], 8)   # (3, 4)
```

### `bisectkit.rotated`: rotated sorted sequences

- `search_rotated(nums, target)` returns the index of `target` in a rotated
  sequence of distinct values, or `-1` if it is absent.
- `contains_rotated(nums, k)` returns whether `k` is present. The sequence may
  contain duplicates.
- `find_min(nums)` returns the smallest element of a rotated sequence of
  distinct values. It raises `ValueError` when `nums` is empty.

Each of these also has a `_linear` counterpart: `search_rotated_linear`,
`contains_rotated_linear` and `find_min_linear`.

```python
from bisectkit.rotated import search_rotated, contains_rotated, find_min

search_rotated([4, 5, 6, 7, 0, 1, 2], 0)    # 4
contains_rotated([2, 5, 6, 0, 0, 1, 2], 3)  # False
find_min([4, 5, 6, 7, 0, 1, 2])             # 0
```

## Command line

Installing the package provides a `bisectkit` command. It has three
subcommands. Each one takes its integers as arguments. If no integers are
given, it reads whitespace-separated integers from standard input.

```
$ bisectkit contains 5 1 3 5 7
Found
$ bisectkit floor-ceil 5 1 2 8 10
Floor and Ceil of 5 are 2 8
$ bisectkit min 4 5 6 7 0 1 2
Minimum element in rotated sorted array: 0
$ echo "1 3 5 7" | bisectkit contains 4
Not Found
```

- `contains TARGET [NUMBERS...]` reports whether the target is in the sorted list.
- `floor-ceil TARGET [NUMBERS...]` prints the floor and the ceiling of the target.
- `min [NUMBERS...]` prints the minimum of a rotated sorted list. It needs at
  least one number.

The command line offers only these three searches. The other functions are
available from Python only.