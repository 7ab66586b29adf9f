"""Credcheck core types and the verification algorithm."""

from credcheck.core.authenticate import authenticate
from credcheck.core.passwords import derive, generate_salt, make_record, needs_rehash, verify
from credcheck.core.types import (
    HASH_LENGTH,
    MAX_ITERATIONS,
    Password,
    PasswordHash,
    PasswordSalt,
    Response,
    UserId,
    Username,
    UserRecord,
    username_key,
)

__all__ = [
    "HASH_LENGTH",
    "MAX_ITERATIONS",
    "Password",
    "PasswordHash",
    "PasswordSalt",
    "Response",
    "UserId",
    "UserRecord",
    "Username",
    "authenticate",
    "derive",
    "generate_salt",
    "make_record",
    "needs_rehash",
    "username_key",
    "verify",
]
