"""Package-wide logger."""

from __future__ import annotations

import logging

logger = logging.getLogger("surf_omnibar")


def configure(verbose: bool = False) -> None:
    """Log to stderr; DEBUG when *verbose*, WARNING otherwise."""
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
