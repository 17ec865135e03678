"""Menu collaborators: show candidate labels, return one line.

``DmenuMenu`` drives the external dmenu program; ``TextualMenu`` runs an
in-terminal picker with the same contract for use outside X.
"""

from __future__ import annotations

import subprocess
from collections.abc import Iterable
from typing import Protocol

from .log import logger
from .preferences import MenuPreferences
from .results import Outcome, from_process


class Menu(Protocol):
    """Minimal interface the dispatcher needs from a menu."""

    def prompt(
        self, prompt: str, candidates: Iterable[str], *, lines: int | None = None
    ) -> Outcome[str]: ...


class DmenuMenu:
    """Prompt through dmenu, embedded into the surf window."""

    def __init__(self, window_id: str, prefs: MenuPreferences | None = None) -> None:
        self.window_id = window_id
        self.prefs = prefs or MenuPreferences()

    def command(self, prompt: str, lines: int | None = None) -> list[str]:
        cmd = [
            self.prefs.program or "dmenu",
            "-w",
            self.window_id,
            "-fn",
            self.prefs.font,
        ]
        if self.prefs.center:
            cmd.append("-c")
        cmd += [
            "-l",
            str(self.prefs.lines if lines is None else lines),
            "-bw",
            str(self.prefs.border_width),
            "-p",
            prompt,
        ]
        return cmd

    def prompt(
        self, prompt: str, candidates: Iterable[str], *, lines: int | None = None
    ) -> Outcome[str]:
        cmd = self.command(prompt, lines)
        logger.debug("running %s", cmd)
        try:
            result = subprocess.run(
                cmd,
                input="\n".join(candidates),
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            return Outcome.fatal(f"{cmd[0]} not found")
        except OSError as exc:
            return Outcome.fatal(str(exc))
        outcome = from_process(result.returncode, result.stdout, result.stderr)
        if not outcome.ok:
            return outcome
        return Outcome.success((outcome.value or "").strip())


class TextualMenu:
    """Prompt with the Textual picker in the current terminal."""

    def prompt(
        self, prompt: str, candidates: Iterable[str], *, lines: int | None = None
    ) -> Outcome[str]:
        from .widgets.picker import PickerApp

        result = PickerApp(prompt, list(candidates)).run()
        if result is None:
            return Outcome.silent_abort()
        return Outcome.success(result.strip())


def make_menu(window_id: str, prefs: MenuPreferences) -> Menu:
    """Return the menu named by ``prefs.program``.

    ``textual`` selects the terminal picker; any other value is run as a
    dmenu-compatible executable.
    """
    if prefs.program == "textual":
        return TextualMenu()
    return DmenuMenu(window_id, prefs)
