"""Per-user statistics screens for the arcade games."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Sequence, TextIO

from .tictactoe import _tokens

_MENU = (
    "What stats do you wish to see?\n"
    "1. Snake\n"
    "2. Othello\n"
    "3. Tic Tac Toe\n"
    "4. Go Back\n"
)
_MATCH_TABLES = {2: "othello", 3: "tictactoe"}


def format_snake_stats(username: str, rows: Iterable[Sequence[Any]]) -> str:
    """Render rows of the snake table: (user, matches, highscore)."""
    parts = [f"User: {username}\n"]
    for row in rows:
        parts.append(f"\nMatches: {row[1]}\nHigh Score: {row[2]}\n\n")
    return "".join(parts)


def format_match_stats(username: str, rows: Iterable[Sequence[Any]]) -> str:
    """Render rows of a table of (user, mode, matches, wins, draws, losses)."""
    parts = [f"User: {username}\n"]
    for row in rows:
        parts.append(
            f"\nMode: {row[1]}\n"
            f"Matches: {row[2]}\n"
            f"Wins: {row[3]}\n"
            f"Draws: {row[4]}\n"
            f"Losses: {row[5]}\n\n"
        )
    return "".join(parts)


def run_stats(
    username: str, db: Any, inp: Any = None, out: TextIO | None = None
) -> None:
    """Show the chosen game's statistics until the user goes back."""
    tokens = _tokens(inp)
    out = sys.stdout if out is None else out
    db.connect()
    while True:
        out.write(_MENU)
        try:
            choice = tokens.next_int()
        except EOFError:
            return
        if choice == 1:
            rows = db.execute("SELECT * FROM snake WHERE user = %s;", (username,))
            out.write(format_snake_stats(username, rows))
        elif choice in _MATCH_TABLES:
            table = _MATCH_TABLES[choice]
            rows = db.execute(f"SELECT * FROM {table} WHERE user = %s;", (username,))
            out.write(format_match_stats(username, rows))
        else:
            return