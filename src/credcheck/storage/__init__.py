"""User stores."""

from __future__ import annotations

from credcheck.config import CredcheckConfig
from credcheck.exceptions import ConfigError
from credcheck.storage.base import UserFinder
from credcheck.storage.memory import InMemoryUserFinder
from credcheck.storage.sqlite_backend import SQLiteUserFinder

__all__ = ["InMemoryUserFinder", "SQLiteUserFinder", "UserFinder", "open_finder"]


def open_finder(config: CredcheckConfig | None = None) -> UserFinder:
    """Return the finder selected by ``config.storage_backend``."""
    config = config or CredcheckConfig()
    if config.storage_backend == "sqlite":
        return SQLiteUserFinder(config.db_path)
    if config.storage_backend == "memory":
        return InMemoryUserFinder()
    raise ConfigError(f"Unknown storage backend: {config.storage_backend!r}")
