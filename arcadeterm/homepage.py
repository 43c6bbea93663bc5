"""Login and signup screen shown before the games."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from .database import DatabaseError
from .tictactoe import _tokens

_MENU = (
    "Choose what you wish to do(1/2/3):\n"
    "1. Login (Existing User)\n"
    "2. Signup (New User)\n"
    "3. Exit\n"
)
_RETRY_MENU = "Choose what you wish to do(1/2):\n1. Try Again\n2. Back to Home\n"


class Homepage:
    """Authenticates a user against the user_details table."""

    def __init__(self, db: Any, inp: Any = None, out: TextIO | None = None) -> None:
        self.db = db
        self._tokens = _tokens(inp)
        self._out = sys.stdout if out is None else out
        self.current_user = ""
        self.db.connect()

    def _ask(self, what: str) -> str:
        self._out.write(f"Enter {what}:\n")
        return self._tokens.next()

    def _find_user(self, username: str) -> list[tuple[Any, ...]]:
        return self.db.execute(
            "SELECT * FROM user_details WHERE username = %s;", (username,)
        )

    def login(self) -> bool:
        """Ask for credentials; on a match make that user the current one."""
        username = self._ask("Username")
        password = self._ask("Password")
        try:
            rows = self._find_user(username)
        except DatabaseError as exc:
            self._out.write(f"{exc}\n")
            return False
        if any(row[1] == password for row in rows):
            self.current_user = username
            return True
        return False

    def signup(self) -> bool:
        """Create a new account unless the name is taken."""
        username = self._ask("Username")
        password = self._ask("Password")
        try:
            if self._find_user(username):
                return False
            self.db.execute(
                "INSERT INTO user_details VALUES(%s, %s);", (username, password)
            )
        except DatabaseError as exc:
            self._out.write(f"{exc}\n")
            return False
        self.current_user = username
        self.create_tables(username)
        return True

    def create_tables(self, username: str) -> None:
        """Add the new user's empty rows to every statistics table."""
        for mode in ("player", "computer"):
            self.db.execute(
                "INSERT INTO tictactoe VALUES(%s, %s, 0, 0, 0, 0);", (username, mode)
            )
        self.db.execute("INSERT INTO snake VALUES(%s, 0, 0);", (username,))
        for mode in ("player", "computer"):
            self.db.execute(
                "INSERT INTO othello VALUES(%s, %s, 0, 0, 0, 0);", (username, mode)
            )

    def _attempt(self, action, success: str, failure: str) -> bool:
        """Repeat an action until it works or the user goes back."""
        while True:
            if action():
                self._out.write(success)
                return True
            self._out.write(failure)
            self._out.write(_RETRY_MENU)
            while True:
                retry = self._tokens.next_int()
                if retry == 1:
                    break
                if retry == 2:
                    return False
                self._out.write(_RETRY_MENU)

    def show(self) -> str:
        """Run the menu; return the logged-in user's name, or "" on exit."""
        try:
            while True:
                self._out.write(_MENU)
                choice = self._tokens.next_int()
                if choice == 1:
                    if self._attempt(
                        self.login,
                        "Logged in successfully\n",
                        "Invalid Username/Password.\n",
                    ):
                        break
                elif choice == 2:
                    if self._attempt(
                        self.signup,
                        "Signed up successfully\n",
                        "Username already exists\n",
                    ):
                        break
                elif choice == 3:
                    self._out.write("Exiting\n")
                    break
                else:
                    self._out.write("Invalid Input. Please try again.\n")
        except EOFError:
            pass
        return self.current_user