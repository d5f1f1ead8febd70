"""Console logging for the ``catalog`` logger hierarchy."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_HANDLER_NAME = "catalog-console"


def resolve_level(level: str | int) -> int:
    """Turn a level name such as ``"warning"`` into its number.

    Raises ValueError for names the logging module does not know.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: str | int = "INFO", stream: TextIO | None = None
) -> logging.Handler:
    """Send ``catalog.*`` records to *stream* as bare message lines.

    Calling this again replaces the handler installed by the previous call.
    Returns the installed handler so the caller can detach it. An unknown
    level raises ValueError and leaves the logger untouched.
    """
    numeric_level = resolve_level(level)

    logger = logging.getLogger("catalog")
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    return handler


def detach_logging(handler: logging.Handler) -> None:
    logging.getLogger("catalog").removeHandler(handler)
