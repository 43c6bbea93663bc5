import io

import pytest

from arcadeterm.sudoku import Sudoku, read_grid, run_sudoku

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


def _is_complete(grid):
    digits = set(range(1, 10))
    rows = all(set(row) == digits for row in grid)
    cols = all({grid[r][c] for r in range(9)} == digits for c in range(9))
    boxes = all(
        {grid[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)} == digits
        for br in (0, 3, 6)
        for bc in (0, 3, 6)
    )
    return rows and cols and boxes


def test_solves_classic_puzzle():
    puzzle = Sudoku(PUZZLE)
    assert puzzle.solve() is True
    solved = puzzle.grid
    assert _is_complete(solved)
    assert solved[0] == [5, 3, 4, 6, 7, 8, 9, 1, 2]


def test_givens_are_preserved():
    puzzle = Sudoku(PUZZLE)
    puzzle.solve()
    solved = puzzle.grid
    for r in range(9):
        for c in range(9):
            if PUZZLE[r][c]:
                assert solved[r][c] == PUZZLE[r][c]


def test_unsolvable_grid():
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    grid[1][8] = 9
    assert Sudoku(grid).solve() is False


def test_is_valid_checks_row_column_and_box():
    puzzle = Sudoku(PUZZLE)
    assert puzzle.is_valid(5, 0, 2) is False  # row
    assert puzzle.is_valid(8, 0, 2) is False  # column and box
    assert puzzle.is_valid(6, 0, 2) is False  # box
    assert puzzle.is_valid(4, 0, 2) is True


def test_on_step_sees_final_state():
    steps = []
    puzzle = Sudoku(PUZZLE, on_step=steps.append)
    puzzle.solve()
    assert len(steps) >= 51
    assert steps[-1] == puzzle.grid


def test_format_grid_of_empty_grid():
    assert Sudoku().format_grid() == "0 " * 9 + "\n" + ("0 " * 9 + "\n") * 8


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Sudoku([[0] * 9] * 8)


def test_out_of_range_value_rejected():
    grid = [[0] * 9 for _ in range(9)]
    grid[4][4] = 10
    with pytest.raises(ValueError):
        Sudoku(grid)


def test_read_grid_round_trip():
    text = "\n".join(" ".join(str(v) for v in row) for row in PUZZLE) + "\n"
    assert read_grid(io.StringIO(text)) == PUZZLE


def test_read_grid_too_short():
    with pytest.raises(ValueError):
        read_grid(io.StringIO("1 2 3\n"))


def test_read_grid_non_number():
    with pytest.raises(ValueError):
        read_grid(io.StringIO("a " * 81))


def test_run_sudoku_reports_solution():
    text = "\n".join(" ".join(str(v) for v in row) for row in PUZZLE) + "\n"
    out = io.StringIO()
    assert run_sudoku(io.StringIO(text), out) is True
    output = out.getvalue()
    assert "Grid inputted successfully!" in output
    assert "Grid solved!" in output
    assert output.endswith("Thank you!\n")