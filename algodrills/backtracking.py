"""Backtracking searches: placing N queens and solving Sudoku grids."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

SIZE = 9
BOX = 3
UNASSIGNED = 0


def is_safe_queen(board: Sequence[Sequence[int]], row: int, col: int) -> bool:
    """Return True if a queen at (row, col) is not attacked from the columns to its left."""
    n = len(board)
    if any(board[row][c] for c in range(col)):
        return False
    upper_left = zip(range(row, -1, -1), range(col, -1, -1))
    if any(board[r][c] for r, c in upper_left):
        return False
    lower_left = zip(range(row, n), range(col, -1, -1))
    if any(board[r][c] for r, c in lower_left):
        return False
    return True


def solve_n_queens(n: int) -> Iterator[list[list[int]]]:
    """Yield every placement of n non-attacking queens as a 0/1 board.

    Queens are placed column by column, trying rows from top to bottom.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]

    def place(col: int) -> Iterator[list[list[int]]]:
        if col == n:
            yield [row[:] for row in board]
            return
        for row in range(n):
            if is_safe_queen(board, row, col):
                board[row][col] = 1
                yield from place(col + 1)
                board[row][col] = 0

    return place(0)


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board with each cell padded by one space on either side."""
    return "".join("".join(f" {cell} " for cell in row) + "\n" for row in board)


def _check_grid(grid: Sequence[Sequence[int]]) -> None:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("grid must be 9 by 9")


def is_safe_digit(grid: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Return True if num is absent from the row, column and 3x3 box of (row, col)."""
    if num in grid[row]:
        return False
    if any(line[col] == num for line in grid):
        return False
    box_row, box_col = row - row % BOX, col - col % BOX
    return all(
        grid[r][c] != num
        for r in range(box_row, box_row + BOX)
        for c in range(box_col, box_col + BOX)
    )


def _first_empty(grid: list[list[int]]) -> tuple[int, int] | None:
    return next(
        (
            (r, c)
            for r, line in enumerate(grid)
            for c, value in enumerate(line)
            if value == UNASSIGNED
        ),
        None,
    )


def _fill(grid: list[list[int]]) -> bool:
    cell = _first_empty(grid)
    if cell is None:
        return True
    row, col = cell
    for num in range(1, SIZE + 1):
        if is_safe_digit(grid, row, col, num):
            grid[row][col] = num
            if _fill(grid):
                return True
            grid[row][col] = UNASSIGNED
    return False


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a solved copy of a 9x9 grid where 0 marks an empty cell.

    Raises ValueError if the grid has the wrong shape or has no solution.
    """
    _check_grid(grid)
    work = [list(row) for row in grid]
    if not _fill(work):
        raise ValueError("no solution exists")
    return work


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid with every value right-aligned in a field of width two."""
    return "".join("".join(f"{value:2d}" for value in row) + "\n" for row in grid)