"""Logging setup for applications embedding the scheduler."""
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from leitner.config import Settings

LOGGER_NAME = "leitner"


def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """Attach a single RichHandler to the package logger. Safe to call twice."""
    level = level.upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            return logger
    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


def configure_from_settings(settings: Settings, console: Optional[Console] = None) -> logging.Logger:
    return configure_logging(settings.log_level, console=console)
