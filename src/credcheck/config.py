"""Credcheck configuration."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from credcheck.core.types import MAX_ITERATIONS
from credcheck.exceptions import ConfigError

_ENV_PREFIX = "CREDCHECK_"


class CredcheckConfig(BaseModel):
    """Settings for the bundled stores and for newly derived credentials."""

    db_path: Path = Field(
        default_factory=lambda: Path.home() / ".credcheck" / "users.db",
    )
    storage_backend: str = "sqlite"
    password_iterations: int = Field(default=600_000, gt=0, le=MAX_ITERATIONS)
    salt_length: int = Field(default=32, ge=16)

    @classmethod
    def from_env(cls) -> CredcheckConfig:
        """Build a config from ``CREDCHECK_*`` environment variables."""
        values = {}
        for name in cls.model_fields:
            raw = os.environ.get(_ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc
