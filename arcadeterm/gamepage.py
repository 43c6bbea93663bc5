"""Menu of games offered to a logged-in user."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from .othello import run_othello
from .snake import run_snake
from .stats import run_stats
from .sudoku import run_sudoku
from .tictactoe import _tokens, _Tokens

_MENU = (
    "What would you like to do?\n"
    "1. Snake\n"
    "2. Sudoku Solver\n"
    "3. Othello\n"
    "4. Tic Tac Toe\n"
    "5. Get Stats\n"
    "6. Logout\n"
)


class _TokenLines:
    """Presents a token reader as a stream of one-token lines."""

    def __init__(self, tokens: _Tokens) -> None:
        self._tokens = tokens

    def readline(self) -> str:
        try:
            return self._tokens.next() + "\n"
        except EOFError:
            return ""


class Gamepage:
    """Lets the user pick games until they log out."""

    def __init__(
        self, username: str, db: Any, inp: Any = None, out: TextIO | None = None
    ) -> None:
        self.username = username
        self.db = db
        self._tokens = _tokens(inp)
        self._out = sys.stdout if out is None else out

    def show(self) -> bool:
        self._out.write(f"Welcome {self.username}\n")
        while True:
            self._out.write(_MENU)
            try:
                choice = self._tokens.next()
            except EOFError:
                break
            if choice == "1":
                run_snake(self.username, self.db)
            elif choice == "2":
                run_sudoku(_TokenLines(self._tokens), self._out)
            elif choice == "3":
                run_othello(self.username, self.db, self._tokens, self._out)
            elif choice == "4":
                from .tictactoe import TicTacToe

                game = TicTacToe(self.username, self.db, self._tokens, self._out)
                game.play()
                self._out.write(game.render())
            elif choice == "5":
                run_stats(self.username, self.db, self._tokens, self._out)
            elif choice == "6":
                break
            else:
                self._out.write("Invalid input. Please Try Again!\n")
        return True