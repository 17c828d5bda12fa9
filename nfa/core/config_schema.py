"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML config file.
Used by AppConfig to validate configuration at load time. If a YAML file
has unknown fields or wrong types, a clear ValidationError is raised at
startup instead of a cryptic KeyError deep in application code.

Every field has a default so the CLI still runs when no config/settings
directory can be found (e.g. when installed and run from $HOME).

Each top-level class corresponds to one file in config/settings/:
    ApplicationSchema  → application.yaml
    StorageSchema      → storage.yaml
    LoggingSchema      → logging.yaml
"""

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class QuickNoteSchema(_StrictBase):
    title_length: int = Field(default=10, ge=1)
    ellipsis: str = "..."


class ApplicationSchema(_StrictBase):
    name: str = "nfa"
    version: str = "0.1.0"
    description: str = "A simple note-taking application"
    quick_note: QuickNoteSchema = Field(default_factory=QuickNoteSchema)


# =============================================================================
# storage.yaml
# =============================================================================


class StorageSchema(_StrictBase):
    directory: str = "~/.nfa"
    filename: str = "notes.db"
    echo: bool = False


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool = True


class FileHandlerSchema(_StrictBase):
    enabled: bool = False
    path: str = "logs/system.jsonl"
    max_bytes: int = 10485760
    backup_count: int = 5


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema = Field(default_factory=ConsoleHandlerSchema)
    file: FileHandlerSchema = Field(default_factory=FileHandlerSchema)


class LoggingSchema(_StrictBase):
    level: str = "WARNING"
    format: str = "console"
    handlers: HandlersSchema = Field(default_factory=HandlersSchema)
