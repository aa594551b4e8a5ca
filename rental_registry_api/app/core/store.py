"""
Durable key-value stores for records.

An ``EntityStore`` maps identifier text to one pydantic record type
and persists the mapping in its own SQLite table.  The table's primary
key keeps rows ordered by identifier, although only point lookups are
used.  Records are serialized as JSON using the model's aliases, so
the stored body matches what the API returns.

The store performs no uniqueness checks: ``insert`` overwrites and
returns whatever was there before.  Every method accepts an optional
cursor so several calls (possibly on different stores) can run inside
one ``Database.transaction``.
"""

import sqlite3
from contextlib import contextmanager
from typing import Generic, Iterator, Optional, Type, TypeVar

from pydantic import BaseModel

from .db import Database

T = TypeVar("T", bound=BaseModel)


class EntityStore(Generic[T]):
    """Persistent mapping from identifier to a record of type ``T``."""

    def __init__(self, database: Database, table: str, model: Type[T]) -> None:
        self.database = database
        self.table = table
        self.model = model

    def __repr__(self) -> str:
        return f"EntityStore(table={self.table!r}, model={self.model.__name__})"

    @contextmanager
    def _use(self, cursor: Optional[sqlite3.Cursor], write: bool) -> Iterator[sqlite3.Cursor]:
        if cursor is not None:
            yield cursor
        elif write:
            with self.database.transaction() as own:
                yield own
        else:
            with self.database.cursor() as own:
                yield own

    def _load(self, row: Optional[sqlite3.Row]) -> Optional[T]:
        if row is None:
            return None
        return self.model.model_validate_json(row["record"])

    def get(self, record_id: str, cursor: Optional[sqlite3.Cursor] = None) -> Optional[T]:
        """Return the record stored under ``record_id`` or ``None``."""
        with self._use(cursor, write=False) as cur:
            row = cur.execute(
                f"SELECT record FROM {self.table} WHERE id = ?", (record_id,)
            ).fetchone()
            return self._load(row)

    def insert(self, record_id: str, record: T, cursor: Optional[sqlite3.Cursor] = None) -> Optional[T]:
        """Store ``record`` under ``record_id``.

        Returns the previous record at that key, or ``None`` if the key
        was free.
        """
        body = record.model_dump_json(by_alias=True)
        with self._use(cursor, write=True) as cur:
            previous = self._load(
                cur.execute(
                    f"SELECT record FROM {self.table} WHERE id = ?", (record_id,)
                ).fetchone()
            )
            cur.execute(
                f"""
                INSERT INTO {self.table} (id, record) VALUES (?, ?)
                ON CONFLICT(id) DO UPDATE SET record = excluded.record
                """,
                (record_id, body),
            )
            return previous

    def contains(self, record_id: str, cursor: Optional[sqlite3.Cursor] = None) -> bool:
        with self._use(cursor, write=False) as cur:
            row = cur.execute(
                f"SELECT 1 FROM {self.table} WHERE id = ?", (record_id,)
            ).fetchone()
            return row is not None

    def count(self, cursor: Optional[sqlite3.Cursor] = None) -> int:
        with self._use(cursor, write=False) as cur:
            row = cur.execute(f"SELECT COUNT(*) AS total FROM {self.table}").fetchone()
            return row["total"]
