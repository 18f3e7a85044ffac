from __future__ import annotations
import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> None:
    """Route the package loggers through rich. Safe to call more than once."""
    logger = logging.getLogger("wordgames")
    logger.setLevel(level if isinstance(level, int) else level.upper())
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=console or Console(stderr=True), show_path=False))
