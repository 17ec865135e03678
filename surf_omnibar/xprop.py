"""X window property access through the ``xprop`` binary.

surf publishes the page it shows in ``_SURF_URI`` and navigates when a
client writes ``_SURF_GO``.
"""

from __future__ import annotations

import subprocess

from .log import logger
from .results import Outcome, from_process

CURRENT_URI = "_SURF_URI"
GO = "_SURF_GO"


def extract_quoted(output: str) -> str:
    """Return the text between the first two double quotes of xprop output.

    ``_SURF_URI(UTF8_STRING) = "https://example.com"`` -> ``https://example.com``
    """
    start = output.find('"')
    if start == -1:
        return ""
    end = output.find('"', start + 1)
    if end == -1:
        return output[start + 1 :]
    return output[start + 1 : end]


def run_xprop(*args: str) -> Outcome[str]:
    """Run ``xprop`` and classify the result."""
    try:
        result = subprocess.run(
            ["xprop", *args],
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        return Outcome.fatal("xprop not found")
    except OSError as exc:
        return Outcome.fatal(str(exc))
    return from_process(result.returncode, result.stdout, result.stderr)


class WindowProperties:
    """Read and write string properties on one surf window."""

    def __init__(self, window_id: str) -> None:
        self.window_id = window_id

    def get(self, prop: str) -> Outcome[str]:
        outcome = run_xprop("-id", self.window_id, prop)
        if not outcome.ok:
            return outcome
        value = extract_quoted(outcome.value or "")
        logger.debug("%s on %s = %r", prop, self.window_id, value)
        return Outcome.success(value)

    def set(self, prop: str, value: str) -> Outcome[None]:
        logger.debug("setting %s on %s to %r", prop, self.window_id, value)
        outcome = run_xprop("-id", self.window_id, "-f", prop, "8u", "-set", prop, value)
        if not outcome.ok:
            return outcome  # type: ignore[return-value]
        return Outcome.success(None)
