# minigrep/infrastructure/logging_setup.py

import logging

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "minigrep"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Send minigrep diagnostics to stderr through rich.
    stdout is reserved for matching lines, so nothing here may write to it.
    Calling this again only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
