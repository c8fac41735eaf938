"""Backtracking solver for 9x9 sudoku grids, where 0 marks an empty cell."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["is_safe", "solve", "format_grid"]

SIZE = 9

Grid = list[list[int]]


def _check(grid: Sequence[Sequence[int]]) -> None:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("grid must be 9 rows of 9 cells")
    if any(not 0 <= v <= SIZE for row in grid for v in row):
        raise ValueError("cells must hold 0 to 9")


def is_safe(grid: Sequence[Sequence[int]], row: int, col: int, value: int) -> bool:
    """Return whether value appears nowhere in the cell's row, column or box."""
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    for i in range(SIZE):
        if grid[row][i] == value or grid[i][col] == value:
            return False
        if grid[box_row + i // 3][box_col + i % 3] == value:
            return False
    return True


def _fill(grid: Grid, position: int) -> bool:
    if position == SIZE * SIZE:
        return True
    row, col = divmod(position, SIZE)
    if grid[row][col] > 0:
        return _fill(grid, position + 1)
    for value in range(1, SIZE + 1):
        if is_safe(grid, row, col, value):
            grid[row][col] = value
            if _fill(grid, position + 1):
                return True
        grid[row][col] = 0
    return False


def solve(grid: Sequence[Sequence[int]]) -> Grid:
    """Return a solved copy of grid; raise ValueError if no solution exists."""
    _check(grid)
    work = [list(row) for row in grid]
    if not _fill(work, 0):
        raise ValueError("no solution exists")
    return work


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render the grid with bars between boxes and rules under rows 3 and 6."""
    parts = []
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            parts.append(f"{value} ")
            if j in (2, 5):
                parts.append(" | ")
        if i in (2, 5):
            parts.append("\n-----------------------")
        parts.append("\n")
    parts.append("\n")
    return "".join(parts)