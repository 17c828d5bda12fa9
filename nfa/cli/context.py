"""
CLI State.

Per-invocation state shared between the root callback and the commands.
The note store is opened on first use, so `--help` and argument errors
never touch the filesystem.
"""

from dataclasses import dataclass, field

from nfa.core.config import get_app_config, resolve_storage_dir
from nfa.core.logging import get_logger, log_with_source
from nfa.services.note import NoteManager

logger = get_logger(__name__)


@dataclass
class CliState:
    """Holds the storage override and the lazily opened NoteManager."""

    home: str | None = None
    _manager: NoteManager | None = field(default=None, repr=False)

    @property
    def manager(self) -> NoteManager:
        """
        Open the note store on first access.

        Raises:
            DatabaseError: If the storage directory or store is unusable
        """
        if self._manager is None:
            storage = get_app_config().storage
            directory = resolve_storage_dir(self.home)
            log_with_source(logger, "cli", "debug", "Opening note store", path=str(directory))
            self._manager = NoteManager.open(
                directory,
                filename=storage.filename,
                echo=storage.echo,
            )
        return self._manager

    def close(self) -> None:
        if self._manager is not None:
            self._manager.close()
            self._manager = None
