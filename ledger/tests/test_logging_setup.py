"""
Unit Tests for logging configuration

Tests cover:
1. Level parsing from names, numbers and LEDGER_LOG_LEVEL
2. A single handler attached to the package logger
3. Library use before configuration
"""

import io
import logging

import pytest

from ledger.logging_setup import configure_logging, get_logger, parse_level


class TestParseLevel:
    """Tests for turning level settings into logging levels."""

    def test_int_passthrough(self):
        """Test that numeric levels are returned unchanged."""
        assert parse_level(logging.DEBUG) == logging.DEBUG

    def test_names_and_digits(self):
        """Test that level names (any case) and digit strings are accepted."""
        assert parse_level("info") == logging.INFO
        assert parse_level(" ERROR ") == logging.ERROR
        assert parse_level("15") == 15

    def test_unknown_name_raises(self):
        """Test that an unknown level name is an error."""
        with pytest.raises(ValueError, match="Unknown log level"):
            parse_level("chatty")

    def test_env_fallback(self, monkeypatch):
        """Test that LEDGER_LOG_LEVEL is honored when no level is given."""
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "DEBUG")

        assert parse_level(None) == logging.DEBUG

    def test_default_is_warning(self, monkeypatch):
        """Test that WARNING is used with no level and no environment."""
        monkeypatch.delenv("LEDGER_LOG_LEVEL", raising=False)

        assert parse_level(None) == logging.WARNING


class TestConfigureLogging:
    """Tests for the one-time package logger setup."""

    def test_attaches_single_handler(self, fresh_logging):
        """Test that repeated configuration keeps exactly one handler."""
        stream = io.StringIO()

        configure_logging("INFO", stream=stream)
        configure_logging("DEBUG", stream=io.StringIO())

        assert len(fresh_logging.handlers) == 1
        assert fresh_logging.level == logging.INFO
        assert fresh_logging.propagate is False

    def test_writes_to_stream(self, fresh_logging):
        """Test that package loggers emit through the configured stream."""
        stream = io.StringIO()
        configure_logging("INFO", stream=stream, fmt="%(levelname)s %(message)s")

        get_logger("ledger.service").info("folded %d", 3)
        get_logger("ledger.service").debug("hidden")

        assert stream.getvalue() == "INFO folded 3\n"

    def test_env_level(self, fresh_logging, monkeypatch):
        """Test that LEDGER_LOG_LEVEL sets the level when none is passed."""
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "ERROR")

        configure_logging(stream=io.StringIO())

        assert fresh_logging.level == logging.ERROR

    def test_unconfigured_library_use_is_silent(self, fresh_logging):
        """Test that get_logger installs a NullHandler before configuration."""
        get_logger("ledger.service")

        assert [type(h) for h in fresh_logging.handlers] == [logging.NullHandler]

    def test_null_handler_replaced_on_configure(self, fresh_logging):
        """Test that configuring removes the library NullHandler."""
        get_logger("ledger.service")

        configure_logging("INFO", stream=io.StringIO())

        assert [type(h) for h in fresh_logging.handlers] == [logging.StreamHandler]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
