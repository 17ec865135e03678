"""Filesystem locations for surf-omnibar.

Everything lives under ``~/.surf`` next to surf's own cookie and
history files, so a single directory holds the browser's state.
"""

from __future__ import annotations

import shutil
from pathlib import Path


def surf_home() -> Path:
    """Return surf's configuration directory (``~/.surf``)."""
    return Path.home() / ".surf"


def surf_file(name: str) -> Path:
    """Return ``~/.surf/<name>``."""
    return surf_home() / name


def default_database_path() -> Path:
    return surf_file("bookmarks.sqlite")


def default_preferences_path() -> Path:
    return surf_file("omnibar.yaml")


def find_tool(name: str) -> str | None:
    """Return the absolute path of *name* on ``$PATH`` or None."""
    return shutil.which(name)
