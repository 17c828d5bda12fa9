"""
Note Model.

The single persisted record: an opaque id, a title, content and two
UTC timestamps.

Notes are ordered by ``updated_at`` alone. ``<``, ``<=``, ``>`` and ``>=``
look at nothing else, so two notes with different text but the same
``updated_at`` are neither less nor greater than each other. ``==`` is
pydantic's structural equality over every field.
"""

import secrets
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from nfa.core.utils import utc_now, utc_now_after

NOTE_ID_BITS = 64


def generate_note_id() -> str:
    """
    Return a random 64-bit id as 16 lowercase hex characters.

    No check against the store is made. Collisions are improbable,
    not impossible.
    """
    return f"{secrets.randbits(NOTE_ID_BITS):016x}"


class Note(BaseModel):
    """A user note."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(description="Note unique identifier, also the store key")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last update timestamp (UTC)")

    @classmethod
    def new(cls, title: str, content: str) -> "Note":
        """Build a note with a fresh id and both timestamps set to now."""
        now = utc_now()
        return cls(
            id=generate_note_id(),
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
        )

    def touch(self) -> None:
        """Move ``updated_at`` forward, even when nothing else changed."""
        self.updated_at = utc_now_after(self.updated_at)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.updated_at < other.updated_at

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.updated_at <= other.updated_at

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.updated_at > other.updated_at

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.updated_at >= other.updated_at

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
