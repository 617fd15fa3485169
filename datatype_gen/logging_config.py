"""Logging configuration for datatype_gen.

Modules obtain loggers through :func:`get_logger`; the CLI calls
:func:`setup_logging` once to attach a rich console handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "datatype_gen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module of this package.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        The logger, a child of the package logger.
    """
    return logging.getLogger(name)


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> None:
    """Configure the package logger with a rich handler.

    Calling this more than once replaces the previous handler.

    Args:
        level: Logging level name or number.
        console: Console to log to (defaults to stderr).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
