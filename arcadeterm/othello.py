"""Othello (Reversi) for two players sharing one terminal."""

from __future__ import annotations

import enum
import sys
import time
from typing import Any, TextIO

from .tictactoe import _tokens

SIZE = 8
EMPTY = " "
BLACK = "B"
WHITE = "W"
CLEAR = "\033c\033[H"
Board = list[list[str]]

_DIRECTIONS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)
_SEPARATOR = "     ----------------------------------\n"


def _color_of(player_number: int) -> str:
    return BLACK if player_number == 1 else WHITE


def _opposite(color: str) -> str:
    return WHITE if color == BLACK else BLACK


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < SIZE and 0 <= y < SIZE


def _flanked(
    board: Board, row: int, col: int, color: str, dx: int, dy: int
) -> list[tuple[int, int]]:
    """Opponent pieces that a piece of colour at (row, col) would turn in one direction."""
    opponent = _opposite(color)
    run: list[tuple[int, int]] = []
    x, y = row + dx, col + dy
    while _on_board(x, y) and board[x][y] == opponent:
        run.append((x, y))
        x += dx
        y += dy
    if run and _on_board(x, y) and board[x][y] == color:
        return run
    return []


class GameState(enum.Enum):
    START = "start"
    CURRENT = "current"
    END = "end"


class Player:
    """One side of the board: black is player 1, white is player 2."""

    def __init__(
        self, color: str, user: str, inp: Any = None, out: TextIO | None = None
    ) -> None:
        if color not in (BLACK, WHITE):
            raise ValueError(f"color must be B or W, not {color!r}")
        self.color = color
        self.user = user
        self.number = 1 if color == BLACK else 2
        self._tokens = _tokens(inp)
        self._out = sys.stdout if out is None else out

    def get_move(self, board: Board) -> tuple[int, int]:
        """Ask until a legal move is typed; the flanked pieces are turned over."""
        while True:
            self._out.write(
                f"Player {self.number} please enter your move (eg - A1):\n"
            )
            move = self._tokens.next()
            if len(move) < 2:
                row = col = -1
            else:
                row = ord(move[1]) - ord("1")
                col = ord(move[0].upper()) - ord("A")
            if not _on_board(row, col):
                self._out.write("Entry out of bounds. Please try again!\n")
                continue
            if board[row][col] != EMPTY:
                self._out.write("That spot is already taken. Please try again!\n")
                continue
            if not self.is_valid(board, row, col):
                self._out.write(
                    "Invalid move. Does not lead to turnovers. Please try again!\n"
                )
                continue
            return row, col

    def is_valid(self, board: Board, row: int, col: int) -> bool:
        """Turn over every piece flanked from (row, col); return whether any were."""
        flipped = [
            cell
            for dx, dy in _DIRECTIONS
            for cell in _flanked(board, row, col, self.color, dx, dy)
        ]
        for x, y in flipped:
            board[x][y] = self.color
        return bool(flipped)


class Othello:
    """One game of Othello, recorded in the othello statistics table."""

    def __init__(
        self, username: str, db: Any, inp: Any = None, out: TextIO | None = None
    ) -> None:
        self.username = username
        self.db = db
        self._tokens = _tokens(inp)
        self._out = sys.stdout if out is None else out
        self.board: Board = [[EMPTY] * SIZE for _ in range(SIZE)]
        self.board[3][3] = WHITE
        self.board[4][4] = WHITE
        self.board[3][4] = BLACK
        self.board[4][3] = BLACK
        self.pieces_on_board = 4
        self.state = GameState.START
        self.mode = 2
        self._assign_players(1)

    @property
    def mode_name(self) -> str:
        return "computer" if self.mode == 1 else "player"

    def _assign_players(self, choice: int) -> None:
        opponent = 3 - choice
        self.players = {
            choice: Player(_color_of(choice), self.username, self._tokens, self._out),
            opponent: Player(_color_of(opponent), "opponent", self._tokens, self._out),
        }

    def _setup_players(self) -> None:
        while True:
            self._out.write(
                f"{self.username} are you Player 1(Black) or Player 2(White)? "
                "(Enter 1 or 2)\n"
            )
            choice = self._tokens.next_int()
            if choice in (1, 2):
                break
        self._assign_players(choice)

    def has_valid_move(self, player_number: int) -> bool:
        color = _color_of(player_number)
        return any(
            _flanked(self.board, row, col, color, dx, dy)
            for row in range(SIZE)
            for col in range(SIZE)
            if self.board[row][col] == EMPTY
            for dx, dy in _DIRECTIONS
        )

    def count_pieces(self) -> tuple[int, int]:
        """Return the number of black and of white pieces."""
        cells = [cell for row in self.board for cell in row]
        return cells.count(BLACK), cells.count(WHITE)

    def find_winner(self) -> int | None:
        """Announce and record the result; return the winning player number or None."""
        black, white = self.count_pieces()
        self._out.write(f"Player 1:{black}\nPlayer 2:{white}\n")
        user_is_first = self.players[1].user == self.username
        winner: int | None
        if black > white:
            self._out.write("Player 1 wins!!!\n")
            winner = 1
            column = "wins" if user_is_first else "losses"
        elif black == white:
            self._out.write("Game Drawn!\n")
            winner = None
            column = "draws"
        else:
            self._out.write("Player 2 wins\n")
            winner = 2
            column = "losses" if user_is_first else "wins"
        self.db.execute(
            f"UPDATE othello SET matches = matches + 1, {column} = {column} + 1 "
            "WHERE user = %s AND mode = %s;",
            (self.username, self.mode_name),
        )
        return winner

    def render(self) -> str:
        lines = ["       A   B   C   D   E   F   G   H   \n", _SEPARATOR]
        for number, row in enumerate(self.board, start=1):
            lines.append(f"{number}    | " + "".join(f"{cell} | " for cell in row) + "\n")
            lines.append(_SEPARATOR)
        return "".join(lines)

    def _show(self) -> None:
        self._out.write(CLEAR + self.render())

    def _pause(self) -> None:
        if self._out.isatty():
            self._out.flush()
            time.sleep(0.1)

    def _update_state(self) -> None:
        if self.pieces_on_board > 4:
            self.state = GameState.CURRENT
        if self.pieces_on_board == SIZE * SIZE:
            self.state = GameState.END

    def play(self) -> int | None:
        """Ask who plays black, play to the end and record it; return the winner."""
        self._setup_players()
        self.state = GameState.START
        self._show()
        current, passes = 1, 0
        while passes < 2:
            self._show()
            if not self.has_valid_move(current):
                other = 3 - current
                self._out.write(
                    f"Player {current} has no moves right now. "
                    f"Switching to Player {other}\n"
                )
                self._pause()
                current = other
                passes += 1
                continue
            passes = 0
            player = self.players[current]
            row, col = player.get_move(self.board)
            self.board[row][col] = player.color
            self.pieces_on_board += 1
            self._update_state()
            if self.state is GameState.END:
                break
            current = 3 - current
        self.state = GameState.END
        self._out.write("Game Over\n")
        return self.find_winner()


def run_othello(
    username: str, db: Any, inp: TextIO | None = None, out: TextIO | None = None
) -> int | None:
    return Othello(username, db, inp, out).play()