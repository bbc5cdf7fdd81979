"""Logging setup for applications embedding docfreeze."""

from __future__ import annotations

import logging

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a single console handler to the ``docfreeze`` logger.

    Calling this again replaces the handler instead of stacking another one.
    """
    logger = logging.getLogger("docfreeze")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
