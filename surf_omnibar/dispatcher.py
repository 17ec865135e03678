"""One prompt, one action.

The dispatcher owns a single interaction: it builds the suggestion map
for the requested mode, asks the menu for a line, resolves it to a
value or an operator effect, and only then writes to the store and the
window.  A cancelled or failed collaborator call returns early, before
any write.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from .log import logger
from .menu import Menu
from .operators import (
    Delete,
    Effect,
    Navigate,
    NoOp,
    OperatorRegistry,
    prepend_scheme,
)
from .parser import parse_line
from .persistence import HistoryStore
from .preferences import Preferences
from .results import InsertResult, Outcome
from .suggestions import (
    SuggestionMap,
    bookmarks_only,
    merged,
    resolve,
    with_current_page,
)
from .xprop import CURRENT_URI, GO


class RequestKind(Enum):
    """Property names surf passes to identify what the user asked for."""

    BOOKMARK = "_SURF_BMARK"
    URI_RAW = "_SURF_URI_RAW"
    URI = "_SURF_URI"
    URI_BOOKMARKS = "_SURF_URI_BMARK"


class Window(Protocol):
    """Minimal interface for the browser window's properties."""

    def get(self, prop: str) -> Outcome[str]: ...
    def set(self, prop: str, value: str) -> Outcome[None]: ...


class Dispatcher:
    """Resolve one menu interaction into a navigation or store mutation.

    Parameters
    ----------
    store:
        Open :class:`HistoryStore`; the caller owns its lifetime.
    menu:
        Any :class:`Menu` (dmenu or the Textual picker).
    window:
        Property access for the surf window that triggered the request.

    Every entry point returns an :class:`Outcome` whose value is the URL
    written to ``_SURF_GO``, or None when nothing was navigated.
    """

    def __init__(
        self,
        store: HistoryStore,
        menu: Menu,
        window: Window,
        prefs: Preferences | None = None,
        registry: OperatorRegistry | None = None,
    ) -> None:
        self.store = store
        self.menu = menu
        self.window = window
        self.prefs = prefs or Preferences()
        self.registry = registry or OperatorRegistry.default(self.prefs.templates)

    def run(self, kind: str) -> Outcome[str]:
        """Handle the request named by *kind* (a ``_SURF_*`` token)."""
        try:
            request = RequestKind(kind)
        except ValueError:
            logger.warning("invalid request kind %r", kind)
            return Outcome.success(None, message=f"Invalid request kind: {kind}")

        handlers = {
            RequestKind.BOOKMARK: self.capture_bookmark,
            RequestKind.URI_RAW: self.prompt_raw,
            RequestKind.URI: self.run_enhanced,
            RequestKind.URI_BOOKMARKS: self.browse_bookmarks,
        }
        try:
            return handlers[request]()
        except ValueError as exc:
            return Outcome.fatal(str(exc))

    # -- entry points ---------------------------------------------------------

    def capture_bookmark(self) -> Outcome[str]:
        """Ask for a name and bookmark the page currently shown."""
        current = self.window.get(CURRENT_URI)
        if not current.ok:
            return current
        glyph = self.prefs.display.bookmark_glyph
        names = {glyph: ""}
        choice = self.menu.prompt("Bookmark name", names, lines=0)
        if not choice.ok:
            return choice
        name = resolve(names, choice.value or "")
        self.store.upsert(current.value or "", True, name or None)
        logger.debug("bookmarked %s as %r", current.value, name)
        return Outcome.success(None)

    def prompt_raw(self) -> Outcome[str]:
        """Navigate to whatever is typed, without touching the store."""
        current = self.window.get(CURRENT_URI)
        if not current.ok:
            return current
        url = current.value or ""
        index = {url: url}
        choice = self.menu.prompt("URI:", index)
        if not choice.ok:
            return choice
        return self._navigate(resolve(index, choice.value or ""))

    def browse_bookmarks(self) -> Outcome[str]:
        """Pick a bookmark (or the current page) and navigate to it."""
        index = self._index_with_current(
            bookmarks_only(
                self.store.read_partition(True), self.prefs.display.bookmark_glyph
            )
        )
        if not index.ok:
            return index  # type: ignore[return-value]
        suggestions = index.value or {}
        choice = self.menu.prompt("URI:", suggestions)
        if not choice.ok:
            return choice
        return self._navigate(resolve(suggestions, choice.value or ""))

    def run_enhanced(self) -> Outcome[str]:
        """Full command language over history and bookmarks."""
        index = self._index_with_current(
            merged(self.store.read_all(), self.prefs.display.bookmark_glyph)
        )
        if not index.ok:
            return index  # type: ignore[return-value]
        suggestions = index.value or {}
        choice = self.menu.prompt("URI+:", suggestions)
        if not choice.ok:
            return choice
        line = resolve(suggestions, (choice.value or "").strip()).strip()
        return self.apply(self.resolve_line(line, suggestions))

    # -- resolution -----------------------------------------------------------

    def resolve_line(self, line: str, suggestions: SuggestionMap) -> Effect:
        """Turn a resolved prompt line into an effect without side effects."""
        if not line:
            return NoOp()
        if " " not in line:
            url = prepend_scheme(line, self.prefs.templates.default_scheme)
            return Navigate(url, remember=url)
        command = parse_line(line)
        argument = resolve(suggestions, command.argument)
        return self.registry.dispatch(command.operator, argument)

    def apply(self, effect: Effect) -> Outcome[str]:
        """Perform the store mutation and window write *effect* implies."""
        if isinstance(effect, Delete):
            removed = self.store.delete(effect.value)
            logger.debug(
                "delete %r: %s", effect.value, "removed" if removed else "absent"
            )
            return Outcome.success(None)
        if isinstance(effect, Navigate):
            if effect.remember:
                self._remember(effect.remember)
            return self._navigate(effect.url)
        return Outcome.success(None)

    # -- helpers --------------------------------------------------------------

    def _index_with_current(self, index: SuggestionMap) -> Outcome[SuggestionMap]:
        current = self.window.get(CURRENT_URI)
        if not current.ok:
            return current  # type: ignore[return-value]
        return Outcome.success(
            with_current_page(
                index, current.value or "", self.prefs.display.current_prefix
            )
        )

    def _remember(self, value: str) -> None:
        # An unstorable value still navigates; only the history row is lost.
        try:
            result = self.store.insert_if_absent(value)
        except ValueError as exc:
            logger.debug("not remembering %.80r: %s", value, exc)
            return
        if result is InsertResult.ALREADY_PRESENT:
            logger.debug("keeping existing entry %r", value)

    def _navigate(self, url: str) -> Outcome[str]:
        if not url:
            return Outcome.success(None)
        written = self.window.set(GO, url)
        if not written.ok:
            return written  # type: ignore[return-value]
        return Outcome.success(url)
