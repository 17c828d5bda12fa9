"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Test Store Configuration:
    Tests that need a real store open one in a fresh tmp_path directory,
    so no test can see another's notes and nothing touches ~/.nfa.
"""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from nfa.core.config import get_app_config, get_settings
from nfa.services.note import NoteManager


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _clear_config_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear lru_cache and NFA_* variables so each test gets a fresh load."""
    monkeypatch.delenv("NFA_HOME", raising=False)
    monkeypatch.delenv("NFA_CONFIG_DIR", raising=False)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """Drop root logger handlers added by setup_logging() during the test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    """Empty directory for a note store."""
    path = tmp_path / "store"
    path.mkdir()
    return path


@pytest.fixture
def manager(store_dir: Path) -> Generator[NoteManager, None, None]:
    """
    Provide an open NoteManager over a fresh store.

    Usage:
        def test_create(manager: NoteManager):
            note = manager.create_note("Title", "Body")
            assert manager.get_note(note.id) == note
    """
    note_manager = NoteManager.open(store_dir)
    yield note_manager
    note_manager.close()
