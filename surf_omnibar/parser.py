"""Split one prompt line into an operator token and its argument.

Two fixed attempts, front first:

* ``n 1.2.3``          -> ``("n", "1.2.3")``   (short or ``!`` token up front)
* ``go to the store``  -> ``("store", "go to the")``  (trailing token)

The back attempt deliberately swaps the halves so natural-language
text can be followed by the command selector.
"""

from __future__ import annotations

from typing import NamedTuple


class ParsedCommand(NamedTuple):
    operator: str
    argument: str


def split_front(line: str) -> ParsedCommand | None:
    """Split at the first space; accept only a 1-char or ``!`` token."""
    head, _, tail = line.partition(" ")
    if len(head) == 1 or head.startswith("!"):
        return ParsedCommand(head, tail)
    return None


def split_back(line: str) -> ParsedCommand:
    """Split at the last space; the trailing token is the operator."""
    head, _, tail = line.rpartition(" ")
    return ParsedCommand(tail, head)


def parse_line(line: str) -> ParsedCommand:
    """Parse a trimmed line containing at least one interior space."""
    return split_front(line) or split_back(line)
