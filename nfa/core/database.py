"""
Database Configuration.

Embedded key-value store on a single SQLite file, driven through
SQLAlchemy Core. One table holds raw byte keys and byte values:

    kv(key BLOB PRIMARY KEY, value BLOB NOT NULL)

The store takes an exclusive SQLite lock when opened and keeps it until
closed, so a second process opening the same file fails at open time.
Every statement runs in its own committed transaction, and a store handle
serializes calls made through it with a lock.

Store methods raise SQLAlchemy exceptions unchanged; services translate
them (see nfa.services.base). Only open() converts failures itself.
"""

from collections.abc import Iterator
from pathlib import Path
from threading import RLock
from typing import Any

from sqlalchemy import (
    Column,
    Engine,
    LargeBinary,
    MetaData,
    Table,
    create_engine,
    delete,
    event,
    select,
)
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from nfa.core.exceptions import DatabaseError
from nfa.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FILENAME = "notes.db"

metadata = MetaData()

kv_table = Table(
    "kv",
    metadata,
    Column("key", LargeBinary, primary_key=True),
    Column("value", LargeBinary, nullable=False),
)


def _create_engine(path: Path, echo: bool = False) -> Engine:
    """Create a single-connection SQLite engine holding an exclusive file lock."""
    engine = create_engine(
        f"sqlite:///{path}",
        echo=echo,
        poolclass=StaticPool,
        # timeout=0: lock contention fails immediately instead of waiting
        connect_args={"check_same_thread": False, "timeout": 0},
    )

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        # Hand transaction control to SQLAlchemy so BEGIN EXCLUSIVE is honored
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA locking_mode=EXCLUSIVE")
        cursor.execute("PRAGMA synchronous=FULL")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN EXCLUSIVE")

    return engine


class KeyValueStore:
    """
    Persistent byte-keyed store backed by one SQLite file.

    Usage:
        store = KeyValueStore.open("/home/me/.nfa")
        store.insert(b"key", b"value")
        store.get(b"key")
        store.close()
    """

    def __init__(self, engine: Engine, path: Path) -> None:
        self._engine = engine
        self._path = path
        self._lock = RLock()
        self._closed = False

    @classmethod
    def open(
        cls,
        directory: str | Path,
        filename: str = DEFAULT_FILENAME,
        echo: bool = False,
    ) -> "KeyValueStore":
        """
        Open or create the store inside ``directory``.

        Raises:
            DatabaseError: If the directory is unusable, the file is not a
                valid database, or another process holds the store open
        """
        root = Path(directory)
        if not root.is_dir():
            raise DatabaseError(f"Could not open note store: {root} is not a directory")

        path = root / filename
        engine = _create_engine(path, echo=echo)
        try:
            metadata.create_all(engine)
        except SQLAlchemyError as e:
            engine.dispose()
            logger.error(
                "Failed to open note store",
                extra={"path": str(path), "error": str(e)},
            )
            raise DatabaseError(f"Could not open note store at {path}: {e}") from e

        logger.debug("Note store opened", extra={"path": str(path)})
        return cls(engine, path)

    @property
    def path(self) -> Path:
        """Return the SQLite file backing this store."""
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self, key: bytes) -> bytes | None:
        """Return the value stored under ``key``, or None if absent."""
        with self._lock:
            self._ensure_open()
            with self._engine.begin() as conn:
                row = conn.execute(
                    select(kv_table.c.value).where(kv_table.c.key == key)
                ).first()
        return bytes(row.value) if row is not None else None

    def contains(self, key: bytes) -> bool:
        """Check if ``key`` is present."""
        with self._lock:
            self._ensure_open()
            with self._engine.begin() as conn:
                row = conn.execute(
                    select(kv_table.c.key).where(kv_table.c.key == key)
                ).first()
        return row is not None

    def insert(self, key: bytes, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        stmt = sqlite_insert(kv_table).values(key=key, value=value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[kv_table.c.key],
            set_={"value": stmt.excluded.value},
        )
        with self._lock:
            self._ensure_open()
            with self._engine.begin() as conn:
                conn.execute(stmt)

    def remove(self, key: bytes) -> bool:
        """Remove ``key`` if present. Returns True when a row was deleted."""
        with self._lock:
            self._ensure_open()
            with self._engine.begin() as conn:
                result = conn.execute(delete(kv_table).where(kv_table.c.key == key))
                deleted = result.rowcount
        return deleted > 0

    def items(self) -> Iterator[tuple[bytes, bytes]]:
        """Return every (key, value) pair in ascending key order."""
        with self._lock:
            self._ensure_open()
            with self._engine.begin() as conn:
                rows = conn.execute(
                    select(kv_table.c.key, kv_table.c.value).order_by(kv_table.c.key)
                ).all()
        return iter([(bytes(row.key), bytes(row.value)) for row in rows])

    def close(self) -> None:
        """Release the connection and the file lock. Safe to call twice."""
        with self._lock:
            if self._closed:
                return
            self._engine.dispose()
            self._closed = True
        logger.debug("Note store closed", extra={"path": str(self._path)})

    def _ensure_open(self) -> None:
        if self._closed:
            raise DatabaseError(f"Note store at {self._path} is closed")


__all__ = ["DEFAULT_FILENAME", "KeyValueStore", "kv_table", "metadata"]
