"""
Note Service.

NoteManager is the only way to reach stored notes. It owns one store
handle and offers create, get, update, delete and list.

Behavior worth knowing before changing anything here:

- get_note and update_note raise NoteNotFoundError for an unknown id.
  delete_note does not: removing a missing id succeeds silently.
  Callers that want to report "not found" on delete check exists() first.
- update_note is a partial update. Fields passed as None keep their value,
  and updated_at always moves forward, even when nothing changed.
- update_note reads then writes. Two writers updating the same id at
  once can lose one of the updates; the last write wins.
- list_notes sorts ascending by updated_at. One undecodable record fails
  the whole listing.
"""

from pathlib import Path
from types import TracebackType

from pydantic import ValidationError

from nfa.core.database import DEFAULT_FILENAME, KeyValueStore
from nfa.core.exceptions import SerializationError
from nfa.models.note import Note
from nfa.repositories.note import NoteRepository
from nfa.services.base import BaseService


class NoteManager(BaseService):
    """
    Durable CRUD over notes.

    Usage:
        with NoteManager.open("/home/me/.nfa") as manager:
            note = manager.create_note("Title", "Body")
            manager.update_note(note.id, content="New body")
    """

    def __init__(self, store: KeyValueStore) -> None:
        super().__init__(store)
        self.repo = NoteRepository(store)

    @classmethod
    def open(
        cls,
        path: str | Path,
        filename: str = DEFAULT_FILENAME,
        echo: bool = False,
    ) -> "NoteManager":
        """
        Open or create the note store in the directory ``path``.

        Raises:
            DatabaseError: If the store cannot be opened
        """
        return cls(KeyValueStore.open(path, filename=filename, echo=echo))

    def create_note(self, title: str, content: str) -> Note:
        """
        Create and store a new note.

        The note is committed before this returns.

        Raises:
            SerializationError: If the note cannot be encoded
            DatabaseError: If the write fails
        """
        try:
            note = Note.new(title, content)
        except ValidationError as e:
            raise SerializationError(f"Could not encode note: {e}") from e

        self._log_operation("Creating note", note_id=note.id)
        self._execute_db_operation("create_note", self.repo.save, note)
        return note

    def get_note(self, note_id: str) -> Note:
        """
        Get a note by ID.

        Raises:
            NoteNotFoundError: If the note doesn't exist
            SerializationError: If the stored value cannot be decoded
            DatabaseError: If the read fails
        """
        return self._execute_db_operation("get_note", self.repo.get_by_id, note_id)

    def update_note(
        self,
        note_id: str,
        title: str | None = None,
        content: str | None = None,
    ) -> Note:
        """
        Update an existing note.

        Args:
            note_id: Note ID to update
            title: New title, or None to keep the current one
            content: New content, or None to keep the current one

        Returns:
            The note as stored after the update

        Raises:
            NoteNotFoundError: If the note doesn't exist
            SerializationError: If the note cannot be encoded or decoded
            DatabaseError: If the read or write fails
        """
        note = self.get_note(note_id)

        fields = []
        try:
            if title is not None:
                note.title = title
                fields.append("title")
            if content is not None:
                note.content = content
                fields.append("content")
        except ValidationError as e:
            raise SerializationError(f"Could not encode note {note_id}: {e}") from e

        note.touch()

        self._log_operation("Updating note", note_id=note_id, fields=fields)
        self._execute_db_operation("update_note", self.repo.save, note)
        return note

    def delete_note(self, note_id: str) -> None:
        """
        Delete a note.

        A missing ID is not an error. This differs from get_note and
        update_note on purpose; see the module docstring.

        Raises:
            DatabaseError: If the removal fails
        """
        removed = self._execute_db_operation("delete_note", self.repo.delete, note_id)
        self._log_operation("Deleting note", note_id=note_id, removed=removed)

    def list_notes(self) -> list[Note]:
        """
        List every note, oldest update first.

        Ties on updated_at keep store scan order.

        Raises:
            SerializationError: If any stored record cannot be decoded
            DatabaseError: If the scan fails
        """
        notes = self._execute_db_operation("list_notes", self.repo.get_all)
        notes.sort()
        self._log_debug("Listed notes", count=len(notes))
        return notes

    def exists(self, note_id: str) -> bool:
        """Check if a note exists."""
        return self._execute_db_operation("exists", self.repo.exists, note_id)

    def close(self) -> None:
        """Close the store and release its lock."""
        self.store.close()

    def __enter__(self) -> "NoteManager":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
