"""
Configuration Management.

Loads settings from config/settings/*.yaml and overrides from the
environment. No hardcoded values in code beyond the schema defaults.

Environment (NFA_ prefix):
    NFA_HOME        - storage directory, overrides storage.yaml
    NFA_CONFIG_DIR  - directory holding the YAML settings files

Settings (YAML):
    application.yaml   - App identity, quick note title inference
    storage.yaml       - Note store directory and file name
    logging.yaml       - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from nfa.core.config_schema import (
    ApplicationSchema,
    LoggingSchema,
    StorageSchema,
)
from nfa.core.exceptions import DatabaseError


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


class Settings(BaseSettings):
    """Overrides read from NFA_* environment variables."""

    home: str | None = None
    config_dir: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="NFA_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached environment settings."""
    return Settings()


def get_config_dir() -> Path | None:
    """
    Locate the directory holding the YAML settings files.

    NFA_CONFIG_DIR wins. Otherwise config/settings under the project root
    is used. Returns None when neither can be found.
    """
    configured = get_settings().config_dir
    if configured:
        return Path(configured).expanduser()

    try:
        candidate = find_project_root() / "config" / "settings"
    except RuntimeError:
        return None
    return candidate if candidate.is_dir() else None


def load_yaml_config(filename: str) -> dict[str, Any]:
    """
    Load a YAML configuration file from the settings directory.

    Returns an empty dict when no settings directory or file exists,
    so the schema defaults apply.
    """
    config_dir = get_config_dir()
    if config_dir is None:
        return {}

    config_path = config_dir / filename
    if not config_path.exists():
        return {}

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Unknown fields or wrong types raise a clear error immediately.

    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._storage = _load_validated(StorageSchema, "storage.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def storage(self) -> StorageSchema:
        """Note store settings."""
        return self._storage

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def resolve_storage_dir(override: str | None = None) -> Path:
    """
    Resolve and create the note store directory.

    Precedence: explicit override, then NFA_HOME, then storage.yaml.

    Args:
        override: Directory given on the command line, if any

    Returns:
        Absolute path of an existing directory

    Raises:
        DatabaseError: If the directory cannot be created
    """
    directory = override or get_settings().home or get_app_config().storage.directory
    path = Path(directory).expanduser().resolve()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DatabaseError(f"Could not create storage directory {path}: {e}") from e
    return path
