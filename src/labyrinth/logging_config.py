"""Logging setup for applications embedding the labyrinth engine."""

from __future__ import annotations

import logging

LOGGER_NAME = "labyrinth"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER: logging.Handler | None = None


def configure_logging(level_name: str = "WARNING") -> logging.Logger:
    """Attach one stream handler to the ``labyrinth`` logger.

    Calling this again replaces the handler installed by the previous call.
    The root logger is left alone.
    """
    global _HANDLER

    logger = logging.getLogger(LOGGER_NAME)
    if _HANDLER is not None:
        logger.removeHandler(_HANDLER)

    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_HANDLER)
    logger.setLevel(getattr(logging, level_name.upper(), logging.WARNING))
    return logger
