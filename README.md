# algodrills

A collection of small, well-known algorithms written as plain Python functions.
It has no runtime dependencies.

## Modules

- `algodrills.backtracking`
  - `solve_n_queens(n)` yields every placement of `n` non-attacking queens as
    a 0/1 board (queens placed column by column, rows tried top to bottom).
  - `is_safe_queen(board, row, col)` checks the row and both diagonals to the
    left of a square.
  - `format_board(board)` renders a board with each cell padded by a space on
    either side.
  - `solve_sudoku(grid)` returns a solved copy of a 9x9 grid where `0` marks an
    empty cell; it raises `ValueError` for a wrongly shaped grid or one with no
    solution.
  - `is_safe_digit(grid, row, col, num)` checks a digit against its row, column
    and 3x3 box; `format_grid(grid)` prints each value in a field of width two.
- `algodrills.bitwise`
  - `get_bit`, `set_bit`, `clear_bit` and `toggle_bit` work on 1-based bit
    positions (1 is the least significant bit); a position below 1 raises
    `ValueError`.
  - `subset_sum_exists(values, target)` enumerates every subset through a bit
    mask (the empty subset included).
  - `flip(value)` toggles the lowest bit, `is_odd(value)` tests it, and
    `to_lower(ch)` lower-cases an ASCII letter by setting its `0x20` bit.
- `algodrills.recursion`
  - `strings_of_length(alphabet, k)` yields every string of length `k` over
    the alphabet.
  - `delete_middle(stack)` and `sort_stack(stack)` take a stack listed bottom
    first and return a new list.
  - `fibonacci(n)`, `kth_symbol(n, k)` (the `0 -> 01`, `1 -> 10` grammar),
    `is_palindrome_number(num)`, `ascending(n)` and `descending(n)`.
  - `expand_runs(text)` expands runs such as `3AB` into `ABABAB`, stopping at
    the first position that does not start with a digit.
  - `hanoi_moves(n, source=1, target=3, spare=2)` yields `Move(disk, source,
    target)` records; `hanoi_call_count(n)` gives the number of steps,
    `2**n - 1`.
- `algodrills.sorting`: `insertion_sort`, `merge_sort` and `selection_sort`,
  each returning a new ascending list.
- `algodrills.problems`
  - `distinct_sum_pairs(first, second)` returns index pairs giving distinct
    sums, ordered by sum.
  - `open_edge_count(cells)` counts cell sides not touching another given cell.
  - `election_winners(chefs, votes)` returns an `ElectionResult` with the
    `country` and `chef` having the most votes (ties go to the name that sorts
    first).
  - `evacuation(values, required)` repeatedly takes the largest value and puts
    it back halved, returning an `Evacuation` with `removed`, `succeeded` and
    `count`.

## Example

```python
from algodrills.bitwise import set_bit, subset_sum_exists
from algodrills.recursion import expand_runs, strings_of_length
from algodrills.sorting import merge_sort

set_bit(9, 3)                          # 13
subset_sum_exists([2, 3, 4, 1, 5], 7)  # True
expand_runs("3AB4C5T")                 # "ABABABCCCCTTTTT"
list(strings_of_length("ab", 2))       # ["aa", "ab", "ba", "bb"]
merge_sort([5, 1, 4, 2])               # [1, 2, 4, 5]
```

## What it does not do

The package is a library only: it installs no command-line program and reads
no input by itself. Call the functions from your own code.

## Running the tests

```
pip install -e .[test]
pytest
```