# arcadeterm

A small arcade that runs in your terminal. After logging in (or signing up)
you pick from this menu:

1. **Snake**: steer with `W` `A` `S` `D` and press `X` to quit. Each game is
   counted, and your high score is kept.
2. **Sudoku Solver**: type in a 9×9 grid row by row, with `0` for empty
   cells. When the output is a terminal, you can watch the grid being solved
   step by step.
3. **Othello**: two players share one keyboard. Enter a move as a column
   letter and a row number, for example `D3`.
4. **Tic Tac Toe**: play against another person or against the computer at
   one of five difficulty levels.
5. **Get Stats**: see your matches, wins, draws, losses and Snake high score.
6. **Logout**

## Installing

```
pip install .
```

## Running

```
arcadeterm
```

Options for the database connection:

| option       | default      |
|--------------|--------------|
| `--host`     | `localhost`  |
| `--port`     | `3306`       |
| `--user`     | `root`       |
| `--password` | `password`   |
| `--database` | `mydatabase` |

The command exits with status 1 if it cannot connect.

Snake puts the terminal into raw mode with `termios`, so it needs a POSIX
terminal.

## The database

Accounts and results are kept in a MySQL database, which must already hold
these tables:

| table          | columns                                              |
|----------------|------------------------------------------------------|
| `user_details` | `username`, `password`                               |
| `snake`        | `user`, `matches`, `highscore`                       |
| `othello`      | `user`, `mode`, `matches`, `wins`, `draws`, `losses` |
| `tictactoe`    | `user`, `mode`, `matches`, `wins`, `draws`, `losses` |

When a user signs up, that user gets rows in the game tables: one row for
Snake, and one row each for the `player` and `computer` modes of Othello and
Tic Tac Toe.

## Using the pieces directly

The games are plain classes, so you can drive them from Python, for example
in scripts or tests. Most of them take `inp` and `out` text streams. Here is
the solver:

```python
from arcadeterm.sudoku import Sudoku

puzzle = Sudoku(grid)          # grid: 9 lists of 9 ints, 0 for empty
if puzzle.solve():
    print(puzzle.format_grid())
```

- `arcadeterm.database.Database` wraps the MySQL connection. You can use it
  as a context manager. `execute(query, params)` returns the rows as tuples,
  and it raises `DatabaseError` when the connection or a statement fails.
- `arcadeterm.tictactoe.Player.best_move(board, level)` picks the computer's
  move.
- `arcadeterm.othello.Othello` and `arcadeterm.snake.SnakeGame` expose the
  game state and a `render()` method.
- `arcadeterm.stats.format_snake_stats` and `format_match_stats` turn table
  rows into the text shown on the stats screen.

## What it does not do

- The package does not create the database or its tables. Set them up
  before the first run.
- Passwords are stored and compared as plain text.
- Othello has no computer opponent. Both sides are played from the keyboard.

## Running the tests

```
pip install .[test]
pytest
```