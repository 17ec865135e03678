"""User preferences for surf-omnibar.

Loads menu styling, URL templates and the store location from
~/.surf/omnibar.yaml.  Falls back to sensible defaults if the file
doesn't exist or is invalid.  Creates a default file on first run so
users can discover and edit it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from .log import logger
from .platform import default_database_path, default_preferences_path

_DEFAULT_YAML = """\
# surf-omnibar preferences
# Delete this file to reset to defaults.

menu:
  program: dmenu                 # dmenu or textual
  font: "comic code ligatures"
  lines: 10                      # rows shown in the candidate list
  border_width: 5
  center: true                   # pass -c (requires the dmenu center patch)

templates:
  # {version} receives the argument with dots replaced by dashes
  nightly: "https://nightly.test.k8s.elo.dev/nightly-{version}/plugin/de.elo.ix.plugin.proxy/administration/"
  local: "http://elo-{version}.localhost/repository/plugin/de.elo.ix.plugin.proxy/administration/"
  # {query} receives the argument verbatim
  search: "https://search.elspeth.xyz/search?q={query}"
  default_scheme: "https://"

display:
  bookmark_glyph: "\\U0001F4C4"
  current_prefix: "Current: "

store:
  path: ""                       # empty = ~/.surf/bookmarks.sqlite
"""


@dataclass
class MenuPreferences:
    """How the menu program is launched."""

    program: str = "dmenu"
    font: str = "comic code ligatures"
    lines: int = 10
    border_width: int = 5
    center: bool = True


@dataclass
class TemplatePreferences:
    """URL templates used by the operators."""

    nightly: str = (
        "https://nightly.test.k8s.elo.dev/nightly-{version}"
        "/plugin/de.elo.ix.plugin.proxy/administration/"
    )
    local: str = (
        "http://elo-{version}.localhost/repository"
        "/plugin/de.elo.ix.plugin.proxy/administration/"
    )
    search: str = "https://search.elspeth.xyz/search?q={query}"
    default_scheme: str = "https://"


@dataclass
class DisplayPreferences:
    bookmark_glyph: str = "\U0001f4c4"
    current_prefix: str = "Current: "


@dataclass
class StorePreferences:
    path: str = ""

    def resolved_path(self) -> Path:
        return Path(self.path).expanduser() if self.path else default_database_path()


@dataclass
class Preferences:
    """Top-level omnibar preferences."""

    menu: MenuPreferences = field(default_factory=MenuPreferences)
    templates: TemplatePreferences = field(default_factory=TemplatePreferences)
    display: DisplayPreferences = field(default_factory=DisplayPreferences)
    store: StorePreferences = field(default_factory=StorePreferences)


def _apply_section(target: object, data: object) -> None:
    """Copy known keys from a YAML mapping onto a dataclass, coercing types."""
    if not isinstance(data, dict):
        return
    for f in fields(target):  # type: ignore[arg-type]
        if f.name not in data:
            continue
        current = getattr(target, f.name)
        raw = data[f.name]
        if isinstance(current, bool):
            setattr(target, f.name, bool(raw))
        elif isinstance(current, int):
            setattr(target, f.name, int(raw))
        else:
            setattr(target, f.name, "" if raw is None else str(raw))


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or default_preferences_path()
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            if isinstance(data, dict):
                _apply_section(prefs.menu, data.get("menu"))
                _apply_section(prefs.templates, data.get("templates"))
                _apply_section(prefs.display, data.get("display"))
                _apply_section(prefs.store, data.get("store"))
        except (OSError, yaml.YAMLError, ValueError, TypeError):
            logger.debug("failed to load preferences from %s", path, exc_info=True)
            return Preferences()
    else:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML, encoding="utf-8")
        except OSError:
            logger.debug("could not write default preferences to %s", path)

    return prefs
