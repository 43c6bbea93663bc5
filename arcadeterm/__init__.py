"""Terminal arcade: Snake, Othello, Tic Tac Toe and a Sudoku solver with MySQL-backed stats."""

__version__ = "0.1.0"