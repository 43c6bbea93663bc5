import io
import sys

import pymysql

from arcadeterm import database
from arcadeterm.main import main


class FakeCursor:
    def __init__(self, log):
        self.log = log

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False

    def execute(self, query, params=None):
        self.log.append((query, params))

    def fetchall(self):
        return []


class FakeConnection:
    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.log = []
        self.closed = False

    def cursor(self):
        return FakeCursor(self.log)

    def close(self):
        self.closed = True


def test_connection_failure_returns_one(monkeypatch, capsys):
    def refuse(**kwargs):
        raise pymysql.MySQLError("refused")

    monkeypatch.setattr(database.pymysql, "connect", refuse)
    assert main([]) == 1
    assert "Connection Error" in capsys.readouterr().out


def test_exit_from_homepage(monkeypatch, capsys):
    connections = []

    def connect(**kwargs):
        connection = FakeConnection(**kwargs)
        connections.append(connection)
        return connection

    monkeypatch.setattr(database.pymysql, "connect", connect)
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n"))
    assert main(["--host", "db.example.com", "--database", "arcade"]) == 0
    output = capsys.readouterr().out
    assert "Exiting\n" in output
    assert output.endswith("Thank you!\n")
    assert len(connections) == 1
    assert connections[0].kwargs["host"] == "db.example.com"
    assert connections[0].kwargs["database"] == "arcade"
    assert connections[0].closed


def test_failed_login_is_queried(monkeypatch, capsys):
    connections = []

    def connect(**kwargs):
        connection = FakeConnection(**kwargs)
        connections.append(connection)
        return connection

    monkeypatch.setattr(database.pymysql, "connect", connect)
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\nalice\nwrong\n2\n3\n"))
    assert main([]) == 0
    assert connections[0].log == [
        ("SELECT * FROM user_details WHERE username = %s;", ("alice",))
    ]
    assert "Invalid Username/Password." in capsys.readouterr().out