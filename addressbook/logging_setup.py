"""Console logging for the ``addressbook`` logger tree."""

from __future__ import annotations

import logging

from . import config


def configure_logging(level: str | int | None = None) -> logging.Logger:
    logger = logging.getLogger("addressbook")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level or config.LOG_LEVEL)
    logger.propagate = False
    return logger
