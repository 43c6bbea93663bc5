"""Backtracking Sudoku solver with optional live display."""

from __future__ import annotations

import sys
import time
from typing import Callable, Iterable, TextIO

Grid = list[list[int]]
SIZE = 9
CLEAR = "\033c\033[H"


class Sudoku:
    """A 9x9 grid; zeros are empty cells, non-zero entries are givens."""

    def __init__(
        self,
        grid: Iterable[Iterable[int]] | None = None,
        on_step: Callable[[Grid], None] | None = None,
    ) -> None:
        rows = [[0] * SIZE for _ in range(SIZE)] if grid is None else [list(r) for r in grid]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("a Sudoku grid must be 9 rows of 9 cells")
        if any(not isinstance(v, int) or not 0 <= v <= 9 for row in rows for v in row):
            raise ValueError("cells must be integers from 0 to 9")
        self._grid = rows
        self._givens = frozenset(
            (r, c) for r, row in enumerate(rows) for c, v in enumerate(row) if v
        )
        self._on_step = on_step

    @property
    def grid(self) -> Grid:
        return [row[:] for row in self._grid]

    def is_valid(self, n: int, row: int, col: int) -> bool:
        """True if n appears in neither the row, the column nor the box."""
        if n in self._grid[row]:
            return False
        if any(line[col] == n for line in self._grid):
            return False
        top, left = row // 3 * 3, col // 3 * 3
        return all(n not in self._grid[r][left:left + 3] for r in range(top, top + 3))

    def solve(self) -> bool:
        """Fill the empty cells in row-major order; return whether it worked."""
        empties = [
            (r, c) for r in range(SIZE) for c in range(SIZE) if (r, c) not in self._givens
        ]
        for r, c in empties:
            self._grid[r][c] = 0
        return self._fill(empties, 0)

    def _fill(self, empties: list[tuple[int, int]], index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        for n in range(1, SIZE + 1):
            if self.is_valid(n, row, col):
                self._grid[row][col] = n
                self._step()
                if self._fill(empties, index + 1):
                    return True
                self._grid[row][col] = 0
                self._step()
        return False

    def _step(self) -> None:
        if self._on_step is not None:
            self._on_step(self.grid)

    def format_grid(self) -> str:
        return "".join("".join(f"{v} " for v in row) + "\n" for row in self._grid)


def read_grid(inp: TextIO) -> Grid:
    """Read 81 whitespace-separated integers, row by row."""
    values: list[int] = []
    while len(values) < SIZE * SIZE:
        line = inp.readline()
        if not line:
            raise ValueError(f"expected {SIZE * SIZE} numbers, got {len(values)}")
        for token in line.split():
            try:
                values.append(int(token))
            except ValueError:
                raise ValueError(f"not a number: {token!r}") from None
    values = values[: SIZE * SIZE]
    return [values[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]


def run_sudoku(inp: TextIO | None = None, out: TextIO | None = None) -> bool:
    """Prompt for a grid, solve it and print the result."""
    inp = sys.stdin if inp is None else inp
    out = sys.stdout if out is None else out
    out.write("Enter the grid row by row.\n")
    out.write("Leave a space between every entry and enter a zero to indicate an empty cell.\n")
    grid = read_grid(inp)
    out.write("Grid inputted successfully!\n")

    on_step = None
    if out.isatty():
        def on_step(current: Grid) -> None:
            out.write(CLEAR + "".join("".join(f"{v} " for v in row) + "\n" for row in current))
            out.flush()
            time.sleep(0.1)

    puzzle = Sudoku(grid, on_step)
    solved = puzzle.solve()
    out.write("Grid solved!\n" if solved else "Unsolvable grid\n")
    out.write(puzzle.format_grid())
    out.write("Thank you!\n")
    return solved