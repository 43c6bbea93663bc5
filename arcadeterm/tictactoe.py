"""Tic Tac Toe against another player or a heuristic computer opponent."""

from __future__ import annotations

import enum
import sys
import time
from collections import deque
from typing import Any, Callable, TextIO

EMPTY = " "
CLEAR = "\033c\033[H"
MARKS = ("X", "O")
Board = list[list[str]]

_ROWS = tuple(tuple((r, c) for c in range(3)) for r in range(3))
_COLS = tuple(tuple((r, c) for r in range(3)) for c in range(3))
_DIAGS = (((0, 0), (1, 1), (2, 2)), ((0, 2), (1, 1), (2, 0)))
_LINES = _ROWS + _COLS + _DIAGS

_PREFERENCE = ((1, 1), (0, 0), (0, 2), (2, 2), (2, 0), (0, 1), (1, 2), (2, 1), (1, 0))

# level -> (modulus, threshold): a random move is made when 1 + t % modulus > threshold
_RANDOM_CHANCE = {0: (10, 1), 1: (10, 3), 2: (20, 10), 3: (40, 30), 4: (100, 99)}


def _other(mark: str) -> str:
    """Return the opposing mark, rejecting anything that is not X or O."""
    if mark not in MARKS:
        raise ValueError(f"mark must be X or O, not {mark!r}")
    return MARKS[1 - MARKS.index(mark)]


class _Tokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def next(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("input exhausted")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def next_int(self, default: int = 0) -> int:
        token = self.next()
        try:
            return int(token)
        except ValueError:
            return default


def _tokens(inp: Any) -> _Tokens:
    if isinstance(inp, _Tokens):
        return inp
    return _Tokens(sys.stdin if inp is None else inp)


class PlayerType(enum.Enum):
    HUMAN = "human"
    COMPUTER = "computer"


class Player:
    """One side of the board, either typed in by a person or computed."""

    def __init__(
        self,
        kind: PlayerType,
        mark: str,
        inp: Any = None,
        out: TextIO | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.opponent = _other(mark)
        self.kind = kind
        self.mark = mark
        self._tokens = _tokens(inp)
        self._out = sys.stdout if out is None else out
        self._clock = clock

    def get_move(self, board: Board, level: int = 0) -> tuple[int, int]:
        if self.kind is PlayerType.COMPUTER:
            return self.best_move(board, level)
        while True:
            self._out.write("Enter your move as 'row column' (eg - 1 3):\n")
            row_text, col_text = self._tokens.next(), self._tokens.next()
            try:
                row, col = int(row_text) - 1, int(col_text) - 1
            except ValueError:
                row = col = -1
            if 0 <= row < 3 and 0 <= col < 3 and board[row][col] == EMPTY:
                return row, col
            self._out.write("Invalid Move, please try again.")

    def best_move(self, board: Board, level: int = 0) -> tuple[int, int]:
        """Win if possible, else block, else take the best free cell; sometimes random."""
        best = next(((r, c) for r, c in _PREFERENCE if board[r][c] == EMPTY), (1, 1))
        for cells in _LINES:
            marks = [board[r][c] for r, c in cells]
            mine, theirs = marks.count(self.mark), marks.count(self.opponent)
            if mine == 2 and theirs == 0:
                best = cells[marks.index(EMPTY)]
                break
            if theirs == 2 and mine == 0:
                best = cells[marks.index(EMPTY)]

        chance = _RANDOM_CHANCE.get(level)
        if chance is not None:
            modulus, threshold = chance
            if 1 + int(self._clock()) % modulus > threshold:
                best = self._random_choice(board, best)
        return best

    def _random_choice(self, board: Board, fallback: tuple[int, int]) -> tuple[int, int]:
        candidates = list(_PREFERENCE)
        while candidates:
            index = int(self._clock()) % len(candidates)
            row, col = candidates[index]
            if board[row][col] == EMPTY:
                return row, col
            del candidates[index]
        return fallback


class TicTacToe:
    """One game of Tic Tac Toe, recorded in the tictactoe statistics table."""

    def __init__(
        self,
        username: str,
        db: Any,
        inp: TextIO | None = None,
        out: TextIO | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.username = username
        self.db = db
        self._tokens = _tokens(inp)
        self._out = sys.stdout if out is None else out
        self._clock = clock
        self.board: Board = [[EMPTY] * 3 for _ in range(3)]
        self.mode = 0
        self.level = 0
        self.user = "X"
        self.players: dict[str, Player] = {}

    @property
    def mode_name(self) -> str:
        return "computer" if self.mode == 1 else "player"

    def check_game_over(self) -> bool:
        return any(
            self.board[a[0]][a[1]] != EMPTY
            and self.board[a[0]][a[1]] == self.board[b[0]][b[1]] == self.board[c[0]][c[1]]
            for a, b, c in _LINES
        )

    def check_draw(self) -> bool:
        return all(cell != EMPTY for row in self.board for cell in row)

    def render(self) -> str:
        separator = "     --------------\n"
        lines = ["       1   2   3   \n", separator]
        for number, row in enumerate(self.board, start=1):
            lines.append(f"{number}    | " + "".join(f"{cell} | " for cell in row) + "\n")
            lines.append(separator)
        return "".join(lines)

    def _ask_mark(self, prompt: str) -> str:
        while True:
            self._out.write(prompt)
            mark = self._tokens.next()[0].upper()
            if mark in MARKS:
                return mark

    def _setup(self) -> None:
        self._out.write("Do you wish to play\n1. vs Computer\n2. vs Player?\n")
        self.mode = self._tokens.next_int()
        if self.mode == 1:
            self._out.write(
                "Choose your difficulty level:\n1. Useless\n2. Easy\n3. Medium\n"
                "4. Hard\n5. Impossible to win!\n"
            )
            self.level = self._tokens.next_int()
            self.user = self._ask_mark(f"{self.username} are you X or O?(X starts)\n")
            computer = _other(self.user)
            self.players = {
                self.user: Player(PlayerType.HUMAN, self.user, self._tokens, self._out, self._clock),
                computer: Player(PlayerType.COMPUTER, computer, self._tokens, self._out, self._clock),
            }
        else:
            self.user = self._ask_mark(f"{self.username}are you X or O?(X starts)\n")
            self.players = {
                mark: Player(PlayerType.HUMAN, mark, self._tokens, self._out, self._clock)
                for mark in MARKS
            }

    def _record(self, column: str) -> None:
        self.db.execute(
            f"UPDATE tictactoe SET matches = matches + 1, {column} = {column} + 1 "
            "WHERE user = %s AND mode = %s;",
            (self.username, self.mode_name),
        )

    def play(self) -> str | None:
        """Ask for the setup, play to the end and record it; return the winner or None."""
        self._setup()
        current = "X"
        while True:
            self._out.write(CLEAR)
            self._out.write(self.render())
            self._out.write(f"Player {current} ")
            row, col = self.players[current].get_move(self.board, self.level)
            self.board[row][col] = current
            if self.check_game_over():
                self._out.write(f"{current} wins!!!\n")
                self._record("wins" if self.user == current else "losses")
                return current
            if self.check_draw():
                self._out.write("Draw Game\n")
                self._record("draws")
                return None
            current = _other(current)


def run_tictactoe(
    username: str, db: Any, inp: TextIO | None = None, out: TextIO | None = None
) -> str | None:
    out = sys.stdout if out is None else out
    game = TicTacToe(username, db, inp, out)
    winner = game.play()
    out.write(game.render())
    return winner