"""Credential value types and the stored authentication record."""

from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

HASH_LENGTH = 32  # SHA-256 output size
MAX_ITERATIONS = 2**31 - 1  # hashlib.pbkdf2_hmac limit

_REDACTED = "********"


class UserId(RootModel[uuid.UUID]):
    """Opaque, stable identifier of an account."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def new(cls) -> UserId:
        return cls(uuid.uuid4())

    def __str__(self) -> str:
        return str(self.root)


class Username(RootModel[str]):
    """Lookup key for an account."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root


def username_key(username: Username | str) -> str:
    """Return the plain string a store keys *username* by."""
    return username.root if isinstance(username, Username) else username


class Password(RootModel[str]):
    """Plaintext secret for a single attempt. Never rendered."""

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({_REDACTED!r})"

    def __str__(self) -> str:
        return _REDACTED

    def __repr_args__(self) -> Any:
        yield None, _REDACTED


class PasswordSalt(RootModel[bytes]):
    model_config = ConfigDict(frozen=True)


class PasswordHash(RootModel[bytes]):
    model_config = ConfigDict(frozen=True)


class UserRecord(BaseModel):
    """A user, as far as authentication is concerned.

    Salt, hash and iteration count are fixed for the life of the record; a
    password change produces a new record carrying the same ``user_id``.
    """

    model_config = ConfigDict(frozen=True)

    user_id: UserId
    password_iterations: int = Field(gt=0, le=MAX_ITERATIONS)
    password_salt: PasswordSalt
    password_hash: PasswordHash

    @field_validator("password_hash")
    @classmethod
    def check_hash_length(cls, value: PasswordHash) -> PasswordHash:
        if len(value.root) != HASH_LENGTH:
            raise ValueError(
                f"password hash must be {HASH_LENGTH} bytes, got {len(value.root)}"
            )
        return value


class Response(BaseModel):
    """A response to an authentication challenge."""

    model_config = ConfigDict(frozen=True)

    username: Username
    password: Password
