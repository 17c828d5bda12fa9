"""
Unit Tests for Base Service.

Tests the BaseService class methods and error handling.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from nfa.core.exceptions import DatabaseError, NoteNotFoundError
from nfa.services.base import BaseService


class TestBaseServiceInit:
    """Tests for BaseService initialization."""

    def test_init_stores_store(self, mock_store):
        """Should keep the provided store handle."""
        service = BaseService(mock_store)

        assert service._store is mock_store
        assert service.store is mock_store

    def test_init_creates_logger(self, mock_store):
        """Should create a logger for the service."""
        assert BaseService(mock_store)._logger is not None


class TestExecuteDbOperation:
    """Tests for _execute_db_operation method."""

    @pytest.fixture
    def service(self, mock_store, mock_logger):
        service = BaseService(mock_store)
        service._logger = mock_logger
        return service

    def test_returns_result_on_success(self, service):
        """Should call the function with its arguments and return the result."""
        func = MagicMock(return_value={"id": "123"})

        result = service._execute_db_operation("op", func, "a", key="b")

        func.assert_called_once_with("a", key="b")
        assert result == {"id": "123"}

    def test_wraps_sqlalchemy_errors(self, service, mock_logger):
        """Should raise DatabaseError naming the operation."""
        func = MagicMock(
            side_effect=OperationalError("SELECT", {}, Exception("disk I/O error"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            service._execute_db_operation("get_note", func)

        assert "get_note" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, OperationalError)
        mock_logger.error.assert_called_once()

    def test_application_errors_pass_through(self, service, mock_logger):
        """Should not convert a missing note into a database error."""
        func = MagicMock(side_effect=NoteNotFoundError("abc"))

        with pytest.raises(NoteNotFoundError):
            service._execute_db_operation("get_note", func)

        mock_logger.error.assert_not_called()

    def test_does_not_retry(self, service):
        """Should call the function exactly once on failure."""
        func = MagicMock(side_effect=OperationalError("INSERT", {}, Exception("locked")))

        with pytest.raises(DatabaseError):
            service._execute_db_operation("create_note", func)

        assert func.call_count == 1


class TestLoggingHelpers:
    """Tests for _log_operation and _log_debug."""

    def test_log_operation_includes_service_name(self, mock_store, mock_logger):
        service = BaseService(mock_store)
        service._logger = mock_logger

        service._log_operation("Doing work", note_id="abc")

        mock_logger.info.assert_called_once_with(
            "Doing work",
            extra={"service": "BaseService", "note_id": "abc"},
        )

    def test_log_debug(self, mock_store, mock_logger):
        service = BaseService(mock_store)
        service._logger = mock_logger

        service._log_debug("Details", count=2)

        mock_logger.debug.assert_called_once_with(
            "Details",
            extra={"service": "BaseService", "count": 2},
        )
