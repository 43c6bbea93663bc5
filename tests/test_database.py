from unittest import mock

import pymysql
import pytest

from arcadeterm.database import Database, DatabaseError


def _fake_connection(rows=()):
    connection = mock.MagicMock()
    cursor = mock.MagicMock()
    cursor.fetchall.return_value = rows
    connection.cursor.return_value.__enter__.return_value = cursor
    return connection, cursor


@mock.patch("pymysql.connect")
def test_connect_passes_settings(connect):
    connection, _ = _fake_connection()
    connect.return_value = connection
    password = "password"
    db = Database(host="db.example.com", user="player", password=password, database="arcade")
    assert db.connect() is db
    kwargs = connect.call_args.kwargs
    assert kwargs["host"] == "db.example.com"
    assert kwargs["user"] == "player"
    assert kwargs["password"] == "password"
    assert kwargs["database"] == "arcade"
    assert db.connected is True


@mock.patch("pymysql.connect")
def test_connect_twice_opens_once(connect):
    connect.return_value, _ = _fake_connection()
    db = Database()
    assert db.connect() is db
    assert db.connect() is db
    assert db.connected is True
    assert connect.call_count == 1


@mock.patch("pymysql.connect")
def test_connect_failure_raises(connect):
    connect.side_effect = pymysql.err.OperationalError(2003, "unreachable")
    db = Database()
    with pytest.raises(DatabaseError, match="Connection Error"):
        db.connect()
    assert db.connected is False


@mock.patch("pymysql.connect")
def test_execute_returns_rows(connect):
    connection, cursor = _fake_connection(rows=(("alice", "secret"),))
    connect.return_value = connection
    db = Database().connect()
    rows = db.execute("SELECT * FROM user_details WHERE username = %s", ("alice",))
    assert rows == [("alice", "secret")]
    cursor.execute.assert_called_once_with(
        "SELECT * FROM user_details WHERE username = %s", ("alice",)
    )


@mock.patch("pymysql.connect")
def test_execute_failure_raises(connect):
    connection, cursor = _fake_connection()
    cursor.execute.side_effect = pymysql.err.ProgrammingError(1064, "syntax")
    connect.return_value = connection
    db = Database().connect()
    with pytest.raises(DatabaseError, match="MySQL Query Error"):
        db.execute("SELEC nothing")


def test_execute_without_connection_raises():
    with pytest.raises(DatabaseError):
        Database().execute("SELECT 1")


@mock.patch("pymysql.connect")
def test_context_manager_closes(connect):
    connection, _ = _fake_connection()
    connect.return_value = connection
    with Database() as db:
        assert db.connected is True
    connection.close.assert_called_once_with()
    assert db.connected is False