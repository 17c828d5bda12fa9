"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.

Hierarchy:
    ApplicationError
        StorageError
            DatabaseError       - store open/read/write/remove failure
            SerializationError  - a Note could not be encoded or decoded
        NotFoundError
            NoteNotFoundError   - the requested note id does not exist
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class StorageError(ApplicationError):
    """Raised when the note store cannot complete an operation."""

    def __init__(self, message: str = "Storage error", code: str = "SYS_STORAGE_ERROR") -> None:
        super().__init__(message, code=code)


class DatabaseError(StorageError):
    """Raised when a database operation fails."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, code="SYS_DATABASE_ERROR")


class SerializationError(StorageError):
    """Raised when a note cannot be encoded to or decoded from bytes."""

    def __init__(self, message: str = "Serialization error") -> None:
        super().__init__(message, code="SYS_SERIALIZATION_ERROR")


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class NoteNotFoundError(NotFoundError):
    """Raised when a note id is not present in the store."""

    def __init__(self, note_id: str) -> None:
        self.note_id = note_id
        super().__init__("Note not found")
