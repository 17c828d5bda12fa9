"""
Note Repository.

Data access layer for notes. Maps Note records to key/value pairs in
the store: the key is the UTF-8 encoded note id and the value is the
note's JSON encoding. The format carries no version marker, so changing
the Note fields makes existing stores unreadable.

Store failures surface as SQLAlchemy exceptions; services translate them.
"""

from pydantic import ValidationError

from nfa.core.database import KeyValueStore
from nfa.core.exceptions import NoteNotFoundError, SerializationError
from nfa.core.logging import get_logger
from nfa.models.note import Note

logger = get_logger(__name__)


def encode_note(note: Note) -> bytes:
    """
    Serialize a note to bytes.

    Raises:
        SerializationError: If the note cannot be encoded
    """
    try:
        return note.model_dump_json().encode("utf-8")
    except (ValueError, UnicodeEncodeError) as e:
        raise SerializationError(f"Could not encode note {note.id}: {e}") from e


def decode_note(data: bytes) -> Note:
    """
    Deserialize a note from bytes.

    Raises:
        SerializationError: If the bytes are not a valid encoded note
    """
    try:
        return Note.model_validate_json(data)
    except (ValidationError, ValueError) as e:
        raise SerializationError(f"Could not decode note: {e}") from e


class NoteRepository:
    """
    Repository for Note records.

    Holds no state beyond the store handle. Every read decodes a fresh
    Note, so callers never share an instance with the store.
    """

    model = Note

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    @staticmethod
    def _key(note_id: str) -> bytes | None:
        """
        Return the store key for a note ID.

        Returns None for an ID with no UTF-8 encoding (lone surrogates, as
        Python produces for undecodable command-line bytes). Such an ID
        never names a stored note.
        """
        try:
            return note_id.encode("utf-8")
        except UnicodeEncodeError:
            return None

    def get_by_id(self, note_id: str) -> Note:
        """
        Get a single note by ID.

        Raises:
            NoteNotFoundError: If no note is stored under the ID
            SerializationError: If the stored value cannot be decoded
        """
        note = self.get_by_id_or_none(note_id)
        if note is None:
            raise NoteNotFoundError(note_id)
        return note

    def get_by_id_or_none(self, note_id: str) -> Note | None:
        """Get a single note by ID, returning None if not found."""
        key = self._key(note_id)
        if key is None:
            return None
        data = self.store.get(key)
        if data is None:
            return None
        return decode_note(data)

    def get_all(self) -> list[Note]:
        """
        Decode every stored note, in store scan order.

        Raises:
            SerializationError: On the first record that fails to decode
        """
        notes = []
        for key, value in self.store.items():
            try:
                notes.append(decode_note(value))
            except SerializationError:
                logger.error(
                    "Corrupt note record",
                    extra={"key": key.decode("utf-8", errors="replace")},
                )
                raise
        return notes

    def save(self, note: Note) -> None:
        """
        Write a note under its ID, replacing any previous value.

        The note is encoded before the store is touched, so a failed
        encode leaves the stored value as it was.

        Raises:
            SerializationError: If the note or its ID cannot be encoded
        """
        data = encode_note(note)
        key = self._key(note.id)
        if key is None:
            raise SerializationError(f"Could not encode note id {note.id!r}")
        self.store.insert(key, data)

    def delete(self, note_id: str) -> bool:
        """Delete a note by ID. Returns False if nothing was stored."""
        key = self._key(note_id)
        if key is None:
            return False
        return self.store.remove(key)

    def exists(self, note_id: str) -> bool:
        """Check if a note exists by ID."""
        key = self._key(note_id)
        return key is not None and self.store.contains(key)
