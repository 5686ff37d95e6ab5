"""Logging setup for thingsq.

Diagnostics go to stderr so they never mix with report output on stdout.
"""

import logging
import sys

_loggers: dict[str, logging.Logger] = {}


def get_logger(name: str = "thingsq") -> logging.Logger:
    """Get a configured logger for thingsq modules.

    Args:
        name: Logger name (typically module name like "thingsq.store")

    Returns:
        Configured logger instance
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[name] = logger
    return logger


def configure(level: str) -> None:
    """Apply a level name (e.g. "DEBUG") to every thingsq logger."""
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    for logger in _loggers.values():
        logger.setLevel(resolved)
    logging.getLogger("thingsq").setLevel(resolved)
