"""Logging setup for resend-cli.

Diagnostics go to stderr so stdout stays clean for tables and JSON.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "resend_cli"


def resolve_level(verbose: bool = False, environ: Mapping[str, str] | None = None) -> int:
    """Pick a level: --verbose, then LOG_LEVEL, then DEBUG=1, else WARNING."""
    environ = os.environ if environ is None else environ
    if verbose:
        return logging.DEBUG
    if name := environ.get("LOG_LEVEL"):
        level = logging.getLevelName(name.upper())
        if isinstance(level, int):
            return level
    if environ.get("DEBUG"):
        return logging.DEBUG
    return logging.WARNING


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a single Rich handler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(verbose))
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
    )
    logger.propagate = False
    return logger
