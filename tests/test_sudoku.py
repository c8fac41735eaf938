import pytest

from dsakit.sudoku import format_grid, is_safe, solve

PUZZLE = [
    [0, 2, 0, 0, 9, 6, 0, 0, 1],
    [7, 9, 4, 0, 5, 1, 8, 0, 0],
    [0, 0, 6, 4, 7, 0, 0, 2, 5],
    [8, 7, 2, 1, 3, 0, 5, 6, 0],
    [1, 0, 5, 0, 0, 7, 0, 8, 4],
    [4, 6, 9, 0, 2, 5, 3, 1, 0],
    [0, 0, 7, 6, 0, 9, 0, 5, 3],
    [0, 0, 0, 7, 8, 3, 4, 9, 0],
    [9, 4, 3, 0, 1, 0, 6, 0, 8],
]

DIGITS = set(range(1, 10))


def test_solution_is_valid():
    solved = solve(PUZZLE)
    for row in solved:
        assert set(row) == DIGITS
    for c in range(9):
        assert {solved[r][c] for r in range(9)} == DIGITS
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = {solved[br + i][bc + j] for i in range(3) for j in range(3)}
            assert box == DIGITS


def test_solution_keeps_givens_and_leaves_input():
    original = [row[:] for row in PUZZLE]
    solved = solve(PUZZLE)
    assert PUZZLE == original
    for r in range(9):
        for c in range(9):
            if PUZZLE[r][c]:
                assert solved[r][c] == PUZZLE[r][c]


def test_is_safe_checks_row_column_and_box():
    assert not is_safe(PUZZLE, 0, 0, 2)  # in row
    assert not is_safe(PUZZLE, 0, 0, 7)  # in column
    assert not is_safe(PUZZLE, 0, 0, 4)  # in box
    assert is_safe(PUZZLE, 0, 0, 3)


def test_unsolvable_grid_raises():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][8] = 9
    with pytest.raises(ValueError):
        solve(grid)


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        solve([[0] * 9 for _ in range(8)])


def test_bad_value_raises():
    grid = [row[:] for row in PUZZLE]
    grid[0][0] = 10
    with pytest.raises(ValueError):
        solve(grid)


def test_format_grid_layout():
    text = format_grid(PUZZLE)
    lines = text.split("\n")
    assert lines[0] == "0 2 0  | 0 9 6  | 0 0 1 "
    assert lines[3] == "-----------------------"
    assert lines[7] == "-----------------------"
    assert text.endswith("\n\n")
    assert text.count("|") == 18