"""
SQLite database integration and simple migration system.

This module provides the ``Database`` client shared by every request.
It owns a single SQLite connection for the lifetime of the application
and exposes one operation, ``execute``, which takes a SQL string with
``?`` placeholders and a sequence of positional parameters and returns
the resulting rows as plain dictionaries.

Failures raised by the driver are wrapped in ``StoreError`` so that the
API layer can translate them into a uniform error response.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .config import settings

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS doctors (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT,
            city TEXT,
            specialty TEXT
        );
        """,
    ),
]


class StoreError(Exception):
    """Raised when a statement cannot be executed by the database."""


def get_database_path(db_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are returned unchanged.  Relative
    paths are resolved against the current working directory.
    """
    db_url = db_url or settings.database_url
    if db_url == MEMORY_DATABASE or Path(db_url).is_absolute():
        return db_url
    return str(Path(db_url).resolve())


class Database:
    """Shared client for the relational store."""

    def __init__(self, db_url: Optional[str] = None) -> None:
        self.path = get_database_path(db_url)
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def connect(self) -> None:
        """Open the connection if it is not open yet."""
        if self._conn is not None:
            return
        # The connection is only used from the event loop thread, but
        # ASGI test clients may drive the app from a worker thread.
        self._conn = sqlite3.connect(self.path, check_same_thread=False)
        # Return rows as dict‑like objects keyed by column name
        self._conn.row_factory = sqlite3.Row
        logger.info("Connected to database %s", self.path)

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Closed database %s", self.path)

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreError("Database is not connected")
        return self._conn

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Execute one parameterized statement and return its rows.

        Statements that produce no rows (a plain ``DELETE``, for
        instance) return an empty list.  Writes are committed before
        returning; on failure the transaction is rolled back and a
        ``StoreError`` is raised from the driver exception.
        """
        conn = self._connection()
        logger.debug("Executing %s with %r", sql, params)
        try:
            cursor = conn.execute(sql, tuple(params))
            rows = [dict(row) for row in cursor.fetchall()]
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StoreError(str(exc)) from exc
        return rows

    def init_db(self) -> None:
        """Create the schema and apply pending migrations.

        Creates the ``migrations`` table if it does not exist, checks the
        current schema version, and applies any new migrations defined in
        ``MIGRATIONS``.  If you add a new migration, append it with an
        incremented version number.
        """
        conn = self._connection()
        cursor = conn.cursor()
        try:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) AS version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    current_version = version
                    logger.info("Applied migration %s", version)
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StoreError(str(exc)) from exc
        finally:
            cursor.close()
