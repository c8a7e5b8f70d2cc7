"""Read column metadata for one table from the SQL Server catalog views.

Runs a single read-only query against INFORMATION_SCHEMA and returns the
columns in ordinal position order.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Iterator

from .exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)

# Primary-key membership comes from the constraint catalog, so composite keys
# flag every participating column.
COLUMNS_QUERY = """
SELECT
    col.COLUMN_NAME,
    col.IS_NULLABLE,
    col.DATA_TYPE,
    CASE WHEN EXISTS (
        SELECT 1
        FROM INFORMATION_SCHEMA.TABLE_CONSTRAINTS AS tc
        INNER JOIN INFORMATION_SCHEMA.CONSTRAINT_COLUMN_USAGE AS ccu
            ON ccu.CONSTRAINT_NAME = tc.CONSTRAINT_NAME
            AND ccu.CONSTRAINT_SCHEMA = tc.CONSTRAINT_SCHEMA
        WHERE tc.TABLE_NAME = col.TABLE_NAME
            AND tc.TABLE_SCHEMA = col.TABLE_SCHEMA
            AND tc.CONSTRAINT_TYPE = 'PRIMARY KEY'
            AND ccu.COLUMN_NAME = col.COLUMN_NAME
    ) THEN 1 ELSE 0 END AS IS_PK
FROM INFORMATION_SCHEMA.COLUMNS AS col
WHERE col.TABLE_NAME = ?
ORDER BY col.ORDINAL_POSITION
"""


@dataclass(frozen=True)
class ColumnDescriptor:
    """One column of the table as reported by the catalog."""

    name: str
    is_nullable: bool
    sql_data_type: str
    is_primary_key: bool

    @classmethod
    def from_row(cls, row: Any) -> ColumnDescriptor:
        """Build from a (COLUMN_NAME, IS_NULLABLE, DATA_TYPE, IS_PK) row."""
        return cls(
            name=row[0],
            is_nullable=row[1] == "YES",
            sql_data_type=row[2],
            is_primary_key=row[3] == 1,
        )


def _default_driver() -> ModuleType:
    # pyodbc links against the unixODBC driver manager on import
    import pyodbc

    return pyodbc


def fetch_columns(connection: Any, table_name: str) -> list[ColumnDescriptor]:
    """Run the schema query on an open DB-API connection."""
    cursor = connection.cursor()
    try:
        cursor.execute(COLUMNS_QUERY, (table_name,))
        columns = [ColumnDescriptor.from_row(row) for row in cursor.fetchall()]
    finally:
        cursor.close()

    logger.debug("Read %d columns for table %r", len(columns), table_name)
    return columns


@contextmanager
def open_connection(
    connection_string: str, driver: ModuleType | None = None,
) -> Iterator[Any]:
    """Open a connection and close it on every exit path."""
    driver = driver or _default_driver()
    try:
        connection = driver.connect(connection_string)
    except driver.Error as exc:
        raise DatabaseConnectionError(f"Could not connect to database: {exc}") from exc

    logger.debug("Opened database connection")
    try:
        yield connection
    finally:
        connection.close()
        logger.debug("Closed database connection")


def read_table(
    connection_string: str, table_name: str, driver: ModuleType | None = None,
) -> list[ColumnDescriptor]:
    """Connect, read the columns of one table, and disconnect."""
    driver = driver or _default_driver()
    with open_connection(connection_string, driver) as connection:
        try:
            return fetch_columns(connection, table_name)
        except driver.Error as exc:
            raise DatabaseConnectionError(
                f"Schema query failed for table '{table_name}': {exc}"
            ) from exc
