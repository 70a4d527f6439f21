# problemset

Plain-Python solutions to a set of classic competitive-programming problems.
Each problem is a function that takes ordinary Python values (ints, lists,
strings, tuples) and returns its answer, so the solutions can be called from
other code and tested directly. The package has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `problemset.introductory`

`weird_algorithm`, `missing_number`, `repetitions`, `increasing_array`,
`permutation`, `number_spiral`, `two_knights`, `two_sets`, `bit_strings`,
`trailing_zeros`, `coin_piles`, `palindrome_reorder`, `creating_strings`,
`apple_division`, `chessboard_queens`, `gray_code`, `tower_of_hanoi` and
`digit_query`.

- `permutation`, `two_sets` and `palindrome_reorder` return `None` when the
  problem has no solution.
- `two_knights(n)` returns the counts for every board size 1..n.
- `chessboard_queens` takes eight strings of eight squares, `.` for free and
  anything else for reserved.
- `tower_of_hanoi(n)` returns the list of `(from, to)` moves from peg 1 to peg 3.

### `problemset.dynamic_programming`

`dice_combinations`, `minimizing_coins`, `coin_combinations_ordered`,
`coin_combinations_unordered`, `removing_digits` and the helper `mod_inverse`.

- `minimizing_coins` returns `None` when the target cannot be made.
- `coin_combinations_ordered` fills the ordered-sum table but multiplies each
  entry by the inverse of two modulo 10^9 + 7 after every coin is added, so
  its result is a residue of that weighted sum, not the plain count of
  ordered combinations.

### `problemset.range_queries`

- `SegmentTree(values, combine, identity)`: range folds with `query(a, b)` and
  point replacement with `update(k, value)`.
- `RangeAddTree(values)`: `add(a, b, delta)` over a range and `value(k)` at a
  position.
- Solvers: `static_range_sums`, `static_range_minimums`, `range_xors` take
  `(a, b)` queries; `dynamic_range_sums` and `dynamic_range_minimums` take
  `(1, k, u)` updates and `(2, a, b)` queries; `range_update_queries` takes
  `(1, a, b, u)` additions and `(2, k)` lookups; `forest_queries` counts `*`
  squares in `(row1, col1, row2, col2)` rectangles of a grid of strings.

### `problemset.sorting_searching`

A `FenwickTree(size)` over positions 0..size-1 with `add`, `prefix_sum` and
`range_sum` (which wraps round the end when `left > right`), and the solvers
`distinct_numbers`, `apartments`, `ferris_wheel`, `concert_tickets`,
`restaurant_customers`, `sum_of_two_values`, `maximum_subarray_sum`,
`stick_lengths`, `missing_coin_sum`, `collecting_numbers`,
`collecting_numbers_after_swaps`, `movie_festival`, `traffic_lights`,
`josephus_every_second` and `josephus`.

- `concert_tickets` gives `None` for a customer who gets no ticket;
  `sum_of_two_values` returns `None` when no pair exists.
- `josephus(n, k)` skips `k` children before each removal and returns the
  removal order.

### `problemset.trees`

`tree_diameter`, `tree_distances` and `tree_distance_sums`, each taking a node
count `n` and a list of `n - 1` undirected edges over nodes 1..n.

## Example

```python
from problemset.introductory import weird_algorithm, gray_code
from problemset.dynamic_programming import dice_combinations
from problemset.range_queries import SegmentTree

weird_algorithm(3)      # [3, 10, 5, 16, 8, 4, 2, 1]
gray_code(2)            # ['00', '01', '11', '10']
dice_combinations(3)    # 4

tree = SegmentTree([5, 2, 7, 1], min, float("inf"))
tree.query(1, 3)        # 2  (positions are 1-based and inclusive)
tree.update(2, 9)
tree.query(1, 3)        # 5
```

Positions in queries are 1-based and inclusive, as in the usual problem
statements, except for `FenwickTree`, which is 0-based. Answers that the
statements give modulo 10^9 + 7 come back already reduced. Malformed input,
such as an out-of-range position or a graph that is not a tree, raises
`ValueError` or `IndexError`.

## What it does not do

There is no command-line program: nothing here reads problem input from
standard input or prints answers. Parse the input yourself and call the
functions with Python values.