"""Tests for package logging setup."""
import logging

from finance_tracker.core import logging as app_logging


def test_configure_logging_attaches_one_handler(monkeypatch):
    monkeypatch.setattr(app_logging, "_handler", None)
    logger = logging.getLogger("finance_tracker")
    before = list(logger.handlers)
    try:
        app_logging.configure_logging("debug")
        app_logging.configure_logging("warning")

        added = [handler for handler in logger.handlers if handler not in before]
        assert len(added) == 1
        assert logger.level == logging.WARNING
        assert logger.propagate is False
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
