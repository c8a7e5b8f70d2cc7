"""Shared fixtures: sample columns and a fake DB-API driver.

The fake driver stands in for pyodbc so the schema reader and CLI can be
exercised without a SQL Server instance.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from pocogen.schema_reader import ColumnDescriptor


# ---------------------------------------------------------------------------
# Fake DB-API driver
# ---------------------------------------------------------------------------

class FakeDriverError(Exception):
    """Plays the role of pyodbc.Error."""


class FakeCursor:
    def __init__(self, connection: FakeConnection) -> None:
        self.connection = connection
        self.closed = False

    def execute(self, sql: str, params: Any = ()) -> None:
        self.connection.executed.append((sql, params))
        if self.connection.query_error is not None:
            raise self.connection.query_error

    def fetchall(self) -> list[tuple]:
        return list(self.connection.rows)

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    def __init__(self, rows: list[tuple], query_error: Exception | None = None) -> None:
        self.rows = rows
        self.query_error = query_error
        self.executed: list[tuple[str, Any]] = []
        self.cursors: list[FakeCursor] = []
        self.closed = False

    def cursor(self) -> FakeCursor:
        cursor = FakeCursor(self)
        self.cursors.append(cursor)
        return cursor

    def close(self) -> None:
        self.closed = True


def make_driver(
    rows: list[tuple] | None = None,
    connect_error: Exception | None = None,
    query_error: Exception | None = None,
) -> SimpleNamespace:
    """Build a module-like driver with connect() and Error."""
    driver = SimpleNamespace(Error=FakeDriverError, connections=[], dsns=[])

    def connect(connection_string: str) -> FakeConnection:
        driver.dsns.append(connection_string)
        if connect_error is not None:
            raise connect_error
        conn = FakeConnection(rows or [], query_error)
        driver.connections.append(conn)
        return conn

    driver.connect = connect
    return driver


# ---------------------------------------------------------------------------
# Sample schema
# ---------------------------------------------------------------------------

USERS_ROWS = [
    ("id", "NO", "int", 1),
    ("user_name", "YES", "varchar", 0),
    ("Balance", "YES", "money", 0),
    ("created at", "NO", "DATETIME", 0),
]


@pytest.fixture
def users_rows() -> list[tuple]:
    return list(USERS_ROWS)


@pytest.fixture
def users_columns() -> list[ColumnDescriptor]:
    return [ColumnDescriptor.from_row(row) for row in USERS_ROWS]


@pytest.fixture
def driver(users_rows):
    """Fake driver whose connections return the users table."""
    return make_driver(rows=users_rows)
