"""Logger configuration for the lodown package."""

from __future__ import annotations

import logging

from lodown.config import settings

__all__ = ["setup_logger"]


def setup_logger(name: str = "lodown", level: str | None = None) -> logging.Logger:
    """
    Configure and return the package logger.

    A library does not choose where records go: the logger gets a
    NullHandler and keeps propagating, so the application's handlers
    decide output. The level is only touched when one is given here or
    through LODOWN_LOG_LEVEL; otherwise whatever the application set
    stays. Safe to call more than once.

    Args:
        name: Logger name (the package root, so every module logger inherits it)
        level: Log level name; defaults to settings.LOG_LEVEL

    Returns:
        The configured logger
    """
    level = level or settings.LOG_LEVEL
    logger = logging.getLogger(name)

    # Only attach a handler if not already configured
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    if level:
        logger.setLevel(getattr(logging, level.upper()))

    return logger
