"""Visited-page and bookmark store."""

from __future__ import annotations

from dataclasses import dataclass

from ..log import logger
from ..results import InsertResult
from ._base import SqliteStore

MAX_VALUE_LEN = 1024
MAX_LABEL_LEN = 256


@dataclass(frozen=True)
class Entry:
    """One stored row: a destination, its bookmark flag and display name."""

    value: str
    bookmarked: bool = False
    label: str | None = None


def _validate(value: str, label: str | None) -> str | None:
    if not value:
        raise ValueError("entry value must not be empty")
    if len(value) > MAX_VALUE_LEN:
        raise ValueError(f"entry value longer than {MAX_VALUE_LEN} characters")
    if label and len(label) > MAX_LABEL_LEN:
        raise ValueError(f"entry label longer than {MAX_LABEL_LEN} characters")
    return label or None


class HistoryStore(SqliteStore):
    """Deduplicated ``value -> (bookmarked, bookmark_name)`` table.

    ``value`` is the primary key: a URL or an operator shorthand such as
    ``!n 1.2.3``.  Rows without a ``bookmark_name`` are suggested under
    their own value.
    """

    def ensure_schema(self) -> None:
        self.execute(
            """
            CREATE TABLE IF NOT EXISTS history
            (
                value         VARCHAR(1024) PRIMARY KEY NOT NULL,
                bookmarked    TINYINT      DEFAULT 0    NOT NULL,
                bookmark_name VARCHAR(256) DEFAULT NULL
            )
            """
        )

    # -- reads ----------------------------------------------------------------

    def read_partition(self, bookmarked: bool) -> list[Entry]:
        """Return rows with the given bookmark flag, ascending by value."""
        rows = self.query(
            "SELECT value, bookmarked, bookmark_name FROM history"
            " WHERE bookmarked = ? ORDER BY value",
            (1 if bookmarked else 0,),
        )
        return [_to_entry(row) for row in rows]

    def read_all(self) -> list[Entry]:
        """Return every row, ascending by value."""
        rows = self.query(
            "SELECT value, bookmarked, bookmark_name FROM history ORDER BY value"
        )
        return [_to_entry(row) for row in rows]

    def get(self, value: str) -> Entry | None:
        rows = self.query(
            "SELECT value, bookmarked, bookmark_name FROM history WHERE value = ?",
            (value,),
        )
        return _to_entry(rows[0]) if rows else None

    def count(self) -> int:
        return self.query("SELECT COUNT(*) FROM history")[0][0]

    # -- writes ---------------------------------------------------------------

    def upsert(self, value: str, bookmarked: bool, label: str | None = None) -> None:
        """Write the row, replacing any existing row with the same value."""
        label = _validate(value, label)
        self.execute(
            "INSERT OR REPLACE INTO history VALUES (:value, :bookmarked, :label)",
            {"value": value, "bookmarked": 1 if bookmarked else 0, "label": label},
        )

    def insert_if_absent(
        self, value: str, bookmarked: bool = False, label: str | None = None
    ) -> InsertResult:
        """Write the row only if *value* is not stored yet.

        An existing row keeps its bookmark flag and label.
        """
        label = _validate(value, label)
        cursor = self.execute(
            "INSERT OR IGNORE INTO history VALUES (:value, :bookmarked, :label)",
            {"value": value, "bookmarked": 1 if bookmarked else 0, "label": label},
        )
        if cursor.rowcount == 0:
            logger.debug("history entry already present: %s", value)
            return InsertResult.ALREADY_PRESENT
        return InsertResult.INSERTED

    def delete(self, value: str) -> bool:
        """Remove the row keyed by *value*; returns False if there was none."""
        cursor = self.execute("DELETE FROM history WHERE value = ?", (value,))
        return cursor.rowcount > 0


def _to_entry(row) -> Entry:
    return Entry(
        value=row["value"],
        bookmarked=bool(row["bookmarked"]),
        label=row["bookmark_name"],
    )
