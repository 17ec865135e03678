"""Tests for surf_omnibar.preferences.

Covers defaults, first-run file creation, loading every section from
YAML, type coercion and graceful fallback on invalid files.  All file
I/O uses tmp_path so nothing touches the real user config.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from surf_omnibar.preferences import Preferences, load_preferences


class TestLoadPreferencesDefaults:
    """When no file exists, load_preferences returns sensible defaults."""

    def test_defaults_when_no_file(self, tmp_path: Path):
        prefs = load_preferences(tmp_path / "nonexistent.yaml")
        assert prefs.menu.program == "dmenu"
        assert prefs.menu.lines == 10
        assert prefs.menu.border_width == 5
        assert prefs.menu.center is True
        assert prefs.templates.default_scheme == "https://"
        assert prefs.display.bookmark_glyph == "\U0001f4c4"
        assert prefs.display.current_prefix == "Current: "

    def test_creates_default_file(self, tmp_path: Path):
        path = tmp_path / "omnibar.yaml"
        load_preferences(path)
        assert path.exists()

    def test_default_file_matches_defaults(self, tmp_path: Path):
        path = tmp_path / "omnibar.yaml"
        load_preferences(path)
        assert load_preferences(path) == Preferences()

    def test_default_store_path(self, tmp_path: Path):
        prefs = load_preferences(tmp_path / "omnibar.yaml")
        expected = Path.home() / ".surf" / "bookmarks.sqlite"
        assert prefs.store.resolved_path() == expected


class TestLoadPreferencesFromYAML:
    """Loading from valid YAML sets all fields correctly."""

    def test_all_sections(self, tmp_path: Path):
        path = tmp_path / "omnibar.yaml"
        path.write_text(
            yaml.dump(
                {
                    "menu": {
                        "program": "textual",
                        "font": "monospace:size=12",
                        "lines": 20,
                        "border_width": 0,
                        "center": False,
                    },
                    "templates": {
                        "nightly": "https://ci/{version}",
                        "local": "http://{version}.localhost/",
                        "search": "https://ddg.example/?q={query}",
                        "default_scheme": "http://",
                    },
                    "display": {"bookmark_glyph": "*", "current_prefix": "Now: "},
                    "store": {"path": str(tmp_path / "db.sqlite")},
                }
            )
        )
        prefs = load_preferences(path)
        assert prefs.menu.program == "textual"
        assert prefs.menu.font == "monospace:size=12"
        assert prefs.menu.lines == 20
        assert prefs.menu.border_width == 0
        assert prefs.menu.center is False
        assert prefs.templates.nightly == "https://ci/{version}"
        assert prefs.templates.search == "https://ddg.example/?q={query}"
        assert prefs.templates.default_scheme == "http://"
        assert prefs.display.bookmark_glyph == "*"
        assert prefs.display.current_prefix == "Now: "
        assert prefs.store.resolved_path() == tmp_path / "db.sqlite"

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path):
        path = tmp_path / "omnibar.yaml"
        path.write_text("menu:\n  lines: '3'\n")
        prefs = load_preferences(path)
        assert prefs.menu.lines == 3
        assert prefs.menu.font == "comic code ligatures"

    def test_unknown_keys_ignored(self, tmp_path: Path):
        path = tmp_path / "omnibar.yaml"
        path.write_text("menu:\n  colour: red\nextra: 1\n")
        assert load_preferences(path) == Preferences()

    def test_store_path_expands_user(self, tmp_path: Path):
        path = tmp_path / "omnibar.yaml"
        path.write_text("store:\n  path: ~/marks.sqlite\n")
        prefs = load_preferences(path)
        assert prefs.store.resolved_path() == Path.home() / "marks.sqlite"


class TestLoadPreferencesInvalid:
    def test_corrupt_yaml_falls_back(self, tmp_path: Path):
        path = tmp_path / "omnibar.yaml"
        path.write_text("menu: [unclosed\n")
        assert load_preferences(path) == Preferences()

    def test_bad_type_falls_back(self, tmp_path: Path):
        path = tmp_path / "omnibar.yaml"
        path.write_text("menu:\n  lines: many\n")
        assert load_preferences(path) == Preferences()

    def test_non_mapping_document(self, tmp_path: Path):
        path = tmp_path / "omnibar.yaml"
        path.write_text("- just\n- a list\n")
        assert load_preferences(path) == Preferences()
