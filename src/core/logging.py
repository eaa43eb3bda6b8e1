"""Logging setup.

Modules log through `logging.getLogger(__name__)`; the CLI calls
`configure_logging` once so records from `core.*` and `cli.*` are rendered by
Rich on stderr (stdout stays reserved for the command output).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAMES = ("core", "cli")


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: str | int = logging.WARNING) -> int:
    """Attach a RichHandler to the project loggers (idempotent).

    Returns the numeric level applied.
    """

    numeric = _resolve_level(level)
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(numeric)
        if not any(isinstance(h, RichHandler) for h in logger.handlers):
            handler = RichHandler(
                console=Console(stderr=True),
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            )
            handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
            logger.addHandler(handler)
    return numeric
