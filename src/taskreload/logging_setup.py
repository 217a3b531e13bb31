"""Logging configuration for taskreload."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Attach a rich handler to the package logger.

    Call this once, before the first request. Only ``taskreload.*`` loggers
    are configured; third-party loggers keep their defaults.
    """
    logger = logging.getLogger("taskreload")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
