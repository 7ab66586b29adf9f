"""Credcheck — salted PBKDF2 credential verification over pluggable user stores."""

from credcheck.config import CredcheckConfig
from credcheck.core import (
    HASH_LENGTH,
    MAX_ITERATIONS,
    Password,
    PasswordHash,
    PasswordSalt,
    Response,
    UserId,
    Username,
    UserRecord,
    authenticate,
    derive,
    generate_salt,
    make_record,
    needs_rehash,
    username_key,
    verify,
)
from credcheck.exceptions import ConfigError, CredcheckError, StorageError
from credcheck.storage import InMemoryUserFinder, SQLiteUserFinder, UserFinder, open_finder

__version__ = "0.1.0"
__all__ = [
    "HASH_LENGTH",
    "MAX_ITERATIONS",
    "ConfigError",
    "CredcheckConfig",
    "CredcheckError",
    "InMemoryUserFinder",
    "Password",
    "PasswordHash",
    "PasswordSalt",
    "Response",
    "SQLiteUserFinder",
    "StorageError",
    "UserFinder",
    "UserId",
    "UserRecord",
    "Username",
    "authenticate",
    "derive",
    "generate_salt",
    "make_record",
    "needs_rehash",
    "open_finder",
    "username_key",
    "verify",
]
