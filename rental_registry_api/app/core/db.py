"""
SQLite database integration and simple migration system.

``Database`` wraps the path of the SQLite file that backs the four
record stores.  It hands out short-lived connections (``connect``),
runs a block of statements atomically (``transaction``) and applies
schema migrations (``init_db``).

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

# Each store is a key-value table: the identifier text is the primary
# key (so rows are kept in key order) and ``record`` holds the JSON body.
MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: the four record stores
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS business_owners (
            id TEXT PRIMARY KEY,
            record TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS customers (
            id TEXT PRIMARY KEY,
            record TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS rental_items (
            id TEXT PRIMARY KEY,
            record TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS leases (
            id TEXT PRIMARY KEY,
            record TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are returned unchanged; relative ones are resolved
    against the project root (the directory holding the package).
    """
    if database_url == ":memory:":
        # Every operation opens its own connection, so an in-memory
        # database would be empty on each call.
        raise ValueError("in-memory databases are not supported; use a file path")
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Database:
    """Handle on the SQLite file holding the record stores."""

    def __init__(self, path: str) -> None:
        self.path = path

    def connect(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        The connection runs in autocommit mode; ``transaction`` issues
        ``BEGIN``/``COMMIT`` explicitly.  Rows are returned as
        ``sqlite3.Row`` so columns can be read by name.
        """
        conn = sqlite3.connect(self.path, isolation_level=None, timeout=30)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor inside a write transaction.

        ``BEGIN IMMEDIATE`` takes the database write lock up front so
        reads made inside the block cannot be invalidated by another
        writer before the block commits.  Any exception rolls the whole
        block back and is re-raised.
        """
        conn = self.connect()
        try:
            cursor = conn.cursor()
            cursor.execute("BEGIN IMMEDIATE")
            try:
                yield cursor
            except BaseException:
                conn.rollback()
                raise
            conn.commit()
        finally:
            conn.close()

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor for read-only statements and close it afterwards."""
        conn = self.connect()
        try:
            yield conn.cursor()
        finally:
            conn.close()

    def init_db(self) -> None:
        """Create the database file if needed and apply pending migrations."""
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        with self.transaction() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    # executescript would commit the open transaction, so
                    # run the statements one by one instead.
                    for statement in sql.split(";"):
                        if statement.strip():
                            cursor.execute(statement)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    logger.info("Applied migration %s to %s", version, self.path)
                    current_version = version
