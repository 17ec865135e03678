"""Base SQLite persistence store."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TypeVar

from ..log import logger

S = TypeVar("S", bound="SqliteStore")


class SqliteStore:
    """SQLite-file store owning a single connection.

    Subclasses override ``ensure_schema()`` to create their tables.  The
    connection is opened in ``__init__`` and released by ``close()``;
    ``open()`` wraps both in a context manager so every exit path closes it.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = path
        if str(path) != ":memory:":
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        self.conn: sqlite3.Connection | None = sqlite3.connect(str(path))
        self.conn.row_factory = sqlite3.Row
        self.ensure_schema()

    @classmethod
    @contextmanager
    def open(cls: type[S], path: Path | str) -> Iterator[S]:
        store = cls(path)
        try:
            yield store
        finally:
            store.close()

    # -- core I/O -------------------------------------------------------------

    def execute(self, sql: str, params: dict | tuple = ()) -> sqlite3.Cursor:
        """Run one statement and commit it."""
        cursor = self.connection.execute(sql, params)
        self.connection.commit()
        return cursor

    def query(self, sql: str, params: dict | tuple = ()) -> list[sqlite3.Row]:
        return self.connection.execute(sql, params).fetchall()

    @property
    def connection(self) -> sqlite3.Connection:
        if self.conn is None:
            raise sqlite3.ProgrammingError(f"store {self.path} is closed")
        return self.conn

    def close(self) -> None:
        """Close the connection; safe to call more than once."""
        if self.conn is not None:
            self.conn.close()
            self.conn = None
            logger.debug("closed store %s", self.path)

    # -- override point -------------------------------------------------------

    def ensure_schema(self) -> None:
        """Create this store's tables if missing (no-op by default)."""
