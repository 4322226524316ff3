"""Logging setup for the command-line frontends.

Library modules only create loggers; handlers are installed here, once,
by whichever frontend is running.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING", *, rich: bool = True) -> None:
    """Route ``blockslide`` log records to stderr at *level*."""
    handler: logging.Handler
    if rich:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))

    logger = logging.getLogger("blockslide")
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
