"""Credcheck exceptions."""


class CredcheckError(Exception):
    """Base exception for all Credcheck errors."""


class StorageError(CredcheckError):
    """Raised by bundled backends when a lookup or write cannot complete."""


class ConfigError(CredcheckError):
    """Raised on invalid configuration."""
