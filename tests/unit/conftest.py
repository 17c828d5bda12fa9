"""
Unit Test Fixtures.

Fixtures for unit tests - the store is mocked.
Unit tests should be fast and isolated, never touching a real database.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from nfa.core.database import KeyValueStore
from nfa.models.note import Note


# =============================================================================
# Store Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_store() -> MagicMock:
    """
    Mock key-value store for unit tests.

    Behaves like an empty store by default.

    Usage:
        def test_repository(mock_store: MagicMock):
            repo = NoteRepository(mock_store)
            # Test repository methods
    """
    store = MagicMock(spec=KeyValueStore)
    store.get.return_value = None
    store.contains.return_value = False
    store.remove.return_value = False
    store.items.return_value = iter([])
    return store


# =============================================================================
# Note Fixtures
# =============================================================================


@pytest.fixture
def make_note():
    """
    Factory for notes with fixed timestamps.

    Usage:
        def test_order(make_note):
            older = make_note(updated_at=datetime(2024, 1, 1))
    """

    def _make(
        note_id: str = "00000000000000aa",
        title: str = "Title",
        content: str = "Content",
        created_at: datetime = datetime(2024, 1, 1, 12, 0, 0),
        updated_at: datetime | None = None,
    ) -> Note:
        return Note(
            id=note_id,
            title=title,
            content=content,
            created_at=created_at,
            updated_at=updated_at or created_at,
        )

    return _make


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            service._logger = mock_logger
            # Test code that logs
            mock_logger.error.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
