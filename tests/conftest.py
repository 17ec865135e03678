"""Shared test fixtures for surf-omnibar test suite."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest

from surf_omnibar.persistence import HistoryStore
from surf_omnibar.preferences import Preferences
from surf_omnibar.results import Outcome


@pytest.fixture
def store(tmp_path: Path):
    """HistoryStore on an isolated database file."""
    with HistoryStore.open(tmp_path / "bookmarks.sqlite") as s:
        yield s


@pytest.fixture
def prefs() -> Preferences:
    return Preferences()


# -- Collaborator fakes -------------------------------------------------------


class FakeMenu:
    """Menu returning canned outcomes and recording what it was shown."""

    def __init__(self, *responses: str | Outcome) -> None:
        self.responses = list(responses)
        self.calls: list[dict] = []

    def prompt(
        self, prompt: str, candidates: Iterable[str], *, lines: int | None = None
    ) -> Outcome[str]:
        self.calls.append(
            {"prompt": prompt, "candidates": list(candidates), "lines": lines}
        )
        response = self.responses.pop(0)
        if isinstance(response, Outcome):
            return response
        return Outcome.success(response)

    @property
    def candidates(self) -> list[str]:
        return self.calls[-1]["candidates"]


class FakeWindow:
    """In-memory window properties with an optional failing property."""

    def __init__(self, current: str = "https://current.example/page") -> None:
        self.props = {"_SURF_URI": current}
        self.writes: list[tuple[str, str]] = []
        self.failures: dict[str, Outcome] = {}

    def get(self, prop: str) -> Outcome[str]:
        if prop in self.failures:
            return self.failures[prop]
        return Outcome.success(self.props.get(prop, ""))

    def set(self, prop: str, value: str) -> Outcome[None]:
        if prop in self.failures:
            return self.failures[prop]
        self.writes.append((prop, value))
        self.props[prop] = value
        return Outcome.success(None)

    @property
    def destinations(self) -> list[str]:
        return [value for prop, value in self.writes if prop == "_SURF_GO"]


@pytest.fixture
def window() -> FakeWindow:
    return FakeWindow()
