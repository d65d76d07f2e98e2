"""Logging setup for the command line.

Library modules only create module loggers; handlers are attached here,
once per CLI invocation.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the ``objkit`` logger at *level*.

    Calling it again replaces the previous handler instead of stacking a
    second one.

    Raises:
        ValueError: *level* is not a known logging level name.
    """
    global _handler

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")

    logger = logging.getLogger("objkit")
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(numeric)
    return logger
