"""Label -> value maps shown in the menu.

Every builder is a pure function over a store snapshot (rows in
ascending-value order).  When two rows share a display label the later
row wins, so collisions resolve to the lexicographically greatest value.
"""

from __future__ import annotations

from collections.abc import Iterable

from .persistence import Entry

BOOKMARK_GLYPH = "\U0001f4c4"
CURRENT_PREFIX = "Current: "

SuggestionMap = dict[str, str]


def display_label(entry: Entry, glyph: str = BOOKMARK_GLYPH) -> str:
    """Return the menu label for *entry*.

    Unlabeled rows are shown under their own value.  Every bookmarked
    row gets the glyph prefix, labeled or not, so a bookmark is always
    distinguishable from plain history.  The glyph never reaches the
    stored value.
    """
    label = entry.label or entry.value
    if entry.bookmarked:
        return f"{glyph} {label}"
    return label


def _build(entries: Iterable[Entry], glyph: str) -> SuggestionMap:
    out: SuggestionMap = {}
    for entry in entries:
        out[display_label(entry, glyph)] = entry.value
    return out


def history_only(entries: Iterable[Entry]) -> SuggestionMap:
    """Map for non-bookmarked rows only (never decorated)."""
    return _build((e for e in entries if not e.bookmarked), BOOKMARK_GLYPH)


def bookmarks_only(
    entries: Iterable[Entry], glyph: str = BOOKMARK_GLYPH
) -> SuggestionMap:
    """Map for bookmarked rows only, every label glyph-decorated."""
    return _build((e for e in entries if e.bookmarked), glyph)


def merged(entries: Iterable[Entry], glyph: str = BOOKMARK_GLYPH) -> SuggestionMap:
    """Single map over all rows, decorating only bookmarked ones."""
    return _build(entries, glyph)


def with_current_page(
    index: SuggestionMap, url: str, prefix: str = CURRENT_PREFIX
) -> SuggestionMap:
    """Return a copy of *index* with a ``Current: <url>`` entry appended."""
    out = dict(index)
    out[prefix + url] = url
    return out


def resolve(index: SuggestionMap, text: str) -> str:
    """Return the value behind label *text*, or *text* itself."""
    return index.get(text, text)
