"""Smoke tests for configuration in dndtracker/config.py."""

import logging

from dndtracker.config import (
    DEFAULT_DEXTERITY,
    DEFAULT_GRID_SIZE,
    DEFAULT_LOG_LEVEL,
    DIFFICULTY_EASY_MAX_RATIO,
    DIFFICULTY_HARD_MAX_RATIO,
    DIFFICULTY_MEDIUM_MAX_RATIO,
    DIFFICULTY_TRIVIAL_MAX_RATIO,
    INITIATIVE_DIE_SIDES,
)
from dndtracker.helpers.debug import configure_logging, log_call


class TestConfigSmoke:
    """Smoke tests to validate configuration values."""

    def test_config_imports_successfully(self):
        """Test that config constants can be imported and are sane."""
        assert INITIATIVE_DIE_SIDES == 20
        assert DEFAULT_GRID_SIZE > 0
        assert DEFAULT_DEXTERITY > 0
        assert DEFAULT_LOG_LEVEL

    def test_difficulty_thresholds_increase(self):
        """Test that difficulty thresholds are ordered."""
        thresholds = [
            DIFFICULTY_TRIVIAL_MAX_RATIO,
            DIFFICULTY_EASY_MAX_RATIO,
            DIFFICULTY_MEDIUM_MAX_RATIO,
            DIFFICULTY_HARD_MAX_RATIO,
        ]
        assert thresholds == sorted(thresholds)
        assert len(set(thresholds)) == len(thresholds)


class TestLoggingHelpers:
    """Tests for the logging helpers."""

    def test_log_call_passes_through(self, caplog):
        """Test that log_call logs and returns the wrapped result."""

        @log_call
        def add(a, b):
            return a + b

        with caplog.at_level(logging.INFO):
            assert add(2, 3) == 5
        assert "Calling add" in caplog.text

    def test_configure_logging_does_not_raise(self):
        """Test that logging configuration accepts level names."""
        configure_logging("debug")
        configure_logging("not-a-level")
