"""
Base Service.

Base class for all services providing common patterns for business logic.
Services own a store handle, orchestrate repositories and implement
business rules.

Usage:
    from nfa.services.base import BaseService

    class TagService(BaseService):
        def __init__(self, store: KeyValueStore) -> None:
            super().__init__(store)
            self.repo = TagRepository(store)

        def get_tag(self, tag_id: str) -> Tag:
            return self._execute_db_operation("get_tag", self.repo.get_by_id, tag_id)
"""

from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from nfa.core.database import KeyValueStore
from nfa.core.exceptions import DatabaseError
from nfa.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BaseService:
    """
    Base class for all services.

    Provides:
    - Store handle ownership
    - Logging context
    - Error wrapping for store operations

    Subclasses should:
    - Call super().__init__(store) in their __init__
    - Initialize repositories in __init__
    - Implement business logic methods
    """

    def __init__(self, store: KeyValueStore) -> None:
        """
        Initialize the service with a store handle.

        Args:
            store: Open key-value store
        """
        self._store = store
        self._logger = get_logger(self.__class__.__module__)

    @property
    def store(self) -> KeyValueStore:
        """Get the store handle."""
        return self._store

    def _execute_db_operation(
        self,
        operation: str,
        func: Callable[..., T],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """
        Execute a store operation with error handling.

        Converts SQLAlchemy exceptions to DatabaseError. Application
        errors raised by ``func`` propagate unchanged. Nothing is retried.

        Args:
            operation: Description of the operation for logging
            func: Callable performing the operation
            *args: Positional arguments for ``func``
            **kwargs: Keyword arguments for ``func``

        Returns:
            Result of ``func``

        Raises:
            DatabaseError: For any store failure
        """
        try:
            return func(*args, **kwargs)
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}: {e}") from e

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
