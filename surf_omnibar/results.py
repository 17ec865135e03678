"""Result values for operations whose failures are swallowed or fatal.

Collaborators (xprop, the menu program) never raise for an ordinary
failure; they return an :class:`Outcome` and the caller decides whether
to continue, abort silently or report the message.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Status(Enum):
    OK = "ok"
    SILENT_ABORT = "silent_abort"
    FATAL = "fatal"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Status of a collaborator call plus its value or diagnostic."""

    status: Status
    value: T | None = None
    message: str = ""

    @classmethod
    def success(cls, value: T | None = None, message: str = "") -> Outcome[T]:
        return cls(Status.OK, value, message)

    @classmethod
    def silent_abort(cls) -> Outcome[T]:
        return cls(Status.SILENT_ABORT)

    @classmethod
    def fatal(cls, message: str) -> Outcome[T]:
        return cls(Status.FATAL, message=message)

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def from_process(returncode: int, stdout: str, stderr: str) -> Outcome[str]:
    """Classify a finished subprocess.

    Non-zero exit with diagnostic text is fatal; non-zero exit without
    any (e.g. dmenu dismissed with Escape) is a silent abort.
    """
    if returncode == 0:
        return Outcome.success(stdout)
    if stderr.strip():
        return Outcome.fatal(stderr.strip())
    return Outcome.silent_abort()


class InsertResult(Enum):
    """Whether an insert-if-absent wrote a row."""

    INSERTED = "inserted"
    ALREADY_PRESENT = "already_present"
