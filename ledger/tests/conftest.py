"""
Pytest configuration for logging isolation.

``configure_logging`` attaches its handler once per process. Tests that
exercise it (directly or through the CLI) get a package logger with no
handlers and the once-only flag cleared, and the previous state is put
back afterwards.
"""

import logging

import pytest

from ledger import logging_setup


@pytest.fixture
def fresh_logging(monkeypatch):
    """Reset the ``ledger`` logger so configure_logging runs again."""
    logger = logging.getLogger("ledger")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    saved_propagate = logger.propagate

    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    monkeypatch.delenv("LEDGER_LOG_LEVEL", raising=False)
    logger.handlers = []

    yield logger

    logger.handlers = saved_handlers
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate
