"""
Unit Tests for Centralized Logging.

Tests the logging configuration, structured fields, and source handling.
"""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock

import pytest

from nfa.core.config import get_settings
from nfa.core.exceptions import DatabaseError
from nfa.core.logging import (
    VALID_SOURCES,
    get_logger,
    log_with_source,
    setup_logging,
)


class TestValidSources:
    """Tests for VALID_SOURCES constant."""

    def test_valid_sources_contains_expected_values(self):
        assert VALID_SOURCES == frozenset({"cli", "storage", "internal", "unknown"})


class TestSetupLogging:
    """Tests for setup_logging handler wiring."""

    @pytest.fixture(autouse=True)
    def _isolated(self, tmp_path, monkeypatch):
        monkeypatch.setenv("NFA_HOME", str(tmp_path / "home"))
        monkeypatch.setenv("NFA_CONFIG_DIR", str(tmp_path / "conf"))
        get_settings.cache_clear()

    def test_level_override(self):
        """Should apply the level passed in over the config."""
        setup_logging(level="DEBUG", enable_console=True, enable_file_logging=False)

        assert logging.getLogger().level == logging.DEBUG

    def test_default_level_from_config(self):
        """Should fall back to the configured level."""
        setup_logging(enable_file_logging=False)

        assert logging.getLogger().level == logging.WARNING

    def test_console_handler_writes_to_stderr(self):
        """Should keep log output off stdout."""
        setup_logging(enable_console=True, enable_file_logging=False)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_no_handlers_when_all_disabled(self):
        setup_logging(enable_console=False, enable_file_logging=False)

        assert logging.getLogger().handlers == []

    def test_file_handler_writes_json_lines(self, tmp_path):
        """Should write JSON records under the storage directory."""
        setup_logging(level="INFO", enable_console=False, enable_file_logging=True)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)

        get_logger("tests.logging").info("hello", note_id="abc")

        log_file = tmp_path / "home" / "logs" / "system.jsonl"
        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["event"] == "hello"
        assert record["note_id"] == "abc"
        assert record["level"] == "info"
        assert record["logger"] == "tests.logging"
        assert "timestamp" in record
        assert "func_name" in record

    def test_file_handler_follows_home_override(self, tmp_path):
        """Should place a relative log path under the given storage directory."""
        setup_logging(
            enable_console=False,
            enable_file_logging=True,
            home=str(tmp_path / "override"),
        )

        get_logger("tests.logging").warning("moved")

        assert (tmp_path / "override" / "logs" / "system.jsonl").exists()
        assert not (tmp_path / "home" / "logs").exists()

    def test_unusable_home_raises_database_error(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")

        with pytest.raises(DatabaseError):
            setup_logging(
                enable_console=False,
                enable_file_logging=True,
                home=str(blocker / "notes"),
            )


class TestLogWithSource:
    """Tests for log_with_source helper."""

    def test_passes_source(self):
        logger = MagicMock()

        log_with_source(logger, "cli", "info", "Note created", note_id="abc")

        logger.info.assert_called_once_with("Note created", source="cli", note_id="abc")

    def test_invalid_level_raises(self):
        logger = MagicMock(spec=["info"])

        with pytest.raises(AttributeError):
            log_with_source(logger, "cli", "verbose", "message")
