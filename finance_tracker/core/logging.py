"""
Package logging.

Modules call ``get_logger(__name__)``; the app calls ``configure_logging``
once at startup to send ``finance_tracker.*`` records to stderr.
"""

import logging
from typing import Optional

from finance_tracker.core.config import settings

LOGGER_NAME = "finance_tracker"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Set the package level (default ``settings.LOG_LEVEL``); the handler is attached only once."""
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
        logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
