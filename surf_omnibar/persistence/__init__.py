"""Persistence layer – each store owns its file path, schema, and I/O."""

from .history import Entry, HistoryStore

__all__ = [
    "Entry",
    "HistoryStore",
]
