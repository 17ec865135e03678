"""Operator registry: named commands matched by shortcut or ``!`` prefix.

Each operator turns its (already label-resolved) argument into an
effect.  The dispatcher applies effects; operators never touch the
store or the window themselves.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .log import logger
from .preferences import TemplatePreferences


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Navigate:
    """Send the window to *url*; optionally remember *remember* as history."""

    url: str
    remember: str | None = None


@dataclass(frozen=True)
class Delete:
    value: str


@dataclass(frozen=True)
class NoOp:
    pass


Effect = Navigate | Delete | NoOp


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


def matches_operator(token: str, name: str) -> bool:
    """True if *token* selects the operator called *name*.

    ``!night`` matches ``nightly`` by prefix; a single character matches
    the first letter; anything else never matches.
    """
    if token.startswith("!"):
        return name.startswith(token[1:])
    if len(token) != 1:
        return False
    return name[:1] == token


def prepend_scheme(uri: str, default_scheme: str = "https://") -> str:
    """Prefix *uri* with *default_scheme* unless it already starts with http."""
    if uri.startswith("http"):
        return uri
    return default_scheme + uri


def version_slug(argument: str) -> str:
    """``1.2.3`` -> ``1-2-3`` for use in a host name."""
    return argument.replace(".", "-")


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Operator:
    name: str
    action: Callable[[str], Effect]

    @property
    def shortcut(self) -> str:
        return self.name[0]


class OperatorRegistry:
    """Ordered operator table; the first matching operator wins."""

    def __init__(self, operators: list[Operator]) -> None:
        self.operators = list(operators)

    @classmethod
    def default(cls, templates: TemplatePreferences | None = None) -> OperatorRegistry:
        t = templates or TemplatePreferences()

        def nightly(arg: str) -> Effect:
            url = t.nightly.format(version=version_slug(arg))
            return Navigate(url, remember=f"!n {arg}")

        def search(arg: str) -> Effect:
            return Navigate(t.search.format(query=arg))

        def delete(arg: str) -> Effect:
            return Delete(arg)

        def bookmarkless(arg: str) -> Effect:
            return Navigate(prepend_scheme(arg, t.default_scheme))

        def local(arg: str) -> Effect:
            url = t.local.format(version=version_slug(arg))
            return Navigate(url, remember=f"!l {arg}")

        return cls(
            [
                Operator("nightly", nightly),
                Operator("search", search),
                Operator("delete", delete),
                Operator("bookmarkless", bookmarkless),
                Operator("local", local),
            ]
        )

    def match(self, token: str) -> Operator | None:
        for operator in self.operators:
            if matches_operator(token, operator.name):
                return operator
        return None

    def dispatch(self, token: str, argument: str) -> Effect:
        """Run the first operator matching *token*; ``NoOp`` if none does."""
        operator = self.match(token)
        if operator is None:
            logger.debug("no operator matches %r", token)
            return NoOp()
        logger.debug("operator %s(%r)", operator.name, argument)
        return operator.action(argument)
