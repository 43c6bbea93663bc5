"""MySQL access for the arcade's accounts and game statistics."""

from __future__ import annotations

from typing import Any, Sequence

import pymysql

PASSWORD = "password"


class DatabaseError(Exception):
    """Raised when the server cannot be reached or a statement fails."""


class Database:
    """A single MySQL connection used by every screen of the arcade."""

    def __init__(
        self,
        host: str = "localhost",
        user: str = "root",
        password: str = PASSWORD,
        database: str = "mydatabase",
        port: int = 3306,
    ) -> None:
        self.host = host
        self.user = user
        self.password = password
        self.database = database
        self.port = port
        self._connection: Any = None

    @property
    def connected(self) -> bool:
        return self._connection is not None

    def connect(self) -> "Database":
        """Open the connection; does nothing if it is already open."""
        if self._connection is not None:
            return self
        try:
            self._connection = pymysql.connect(
                host=self.host,
                user=self.user,
                password=self.password,
                database=self.database,
                port=self.port,
                autocommit=True,
            )
        except pymysql.MySQLError as exc:
            raise DatabaseError(f"Connection Error: {exc}") from exc
        return self

    def execute(
        self, query: str, params: Sequence[Any] | None = None
    ) -> list[tuple[Any, ...]]:
        """Run one statement and return the rows it produced."""
        if self._connection is None:
            raise DatabaseError("MySQL Query Error: not connected")
        try:
            with self._connection.cursor() as cursor:
                cursor.execute(query, params)
                return [tuple(row) for row in cursor.fetchall()]
        except pymysql.MySQLError as exc:
            raise DatabaseError(f"MySQL Query Error: {exc}") from exc

    def close(self) -> None:
        if self._connection is not None:
            connection, self._connection = self._connection, None
            connection.close()

    def __enter__(self) -> "Database":
        return self.connect()

    def __exit__(self, *args: Any) -> None:
        self.close()