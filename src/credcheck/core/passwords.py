"""Password derivation and verification using PBKDF2-HMAC-SHA256 (stdlib)."""

from __future__ import annotations

import hashlib
import hmac
import os
from typing import TYPE_CHECKING

from credcheck.core.types import (
    HASH_LENGTH,
    MAX_ITERATIONS,
    Password,
    PasswordHash,
    PasswordSalt,
    UserId,
    UserRecord,
)

if TYPE_CHECKING:
    from credcheck.config import CredcheckConfig

PBKDF2_DIGEST = "sha256"
DEFAULT_ITERATIONS = 600_000  # OWASP recommended minimum for PBKDF2-SHA256
DEFAULT_SALT_LENGTH = 32


def _password_bytes(password: Password | str) -> bytes:
    if not isinstance(password, Password):
        password = Password(password)
    # surrogatepass keeps encoding total for any Python str
    return password.root.encode("utf-8", "surrogatepass")


def generate_salt(length: int = DEFAULT_SALT_LENGTH) -> PasswordSalt:
    """Return *length* random bytes for a new credential."""
    if length < 1:
        raise ValueError("salt length must be positive")
    return PasswordSalt(os.urandom(length))


def derive(iterations: int, salt: PasswordSalt, password: Password | str) -> PasswordHash:
    """Derive the stored hash for *password* under *salt* and *iterations*."""
    if not 1 <= iterations <= MAX_ITERATIONS:
        raise ValueError(f"iterations must be between 1 and {MAX_ITERATIONS}")
    dk = hashlib.pbkdf2_hmac(
        PBKDF2_DIGEST,
        _password_bytes(password),
        salt.root,
        iterations,
        dklen=HASH_LENGTH,
    )
    return PasswordHash(dk)


def verify(record: UserRecord, password: Password) -> bool:
    """Check *password* against *record*. A mismatch is ``False``, never an error."""
    attempt = derive(record.password_iterations, record.password_salt, password)
    return hmac.compare_digest(attempt.root, record.password_hash.root)


def make_record(
    password: Password | str,
    *,
    user_id: UserId | None = None,
    iterations: int | None = None,
    salt_length: int | None = None,
    config: CredcheckConfig | None = None,
) -> UserRecord:
    """Build a fresh record for *password* with a newly generated salt.

    The work factor and salt length come from the explicit arguments, then
    *config*, then the module defaults. Pass the existing ``user_id`` when
    replacing an account's password so the identifier stays stable across
    credential changes.
    """
    if iterations is None:
        iterations = config.password_iterations if config is not None else DEFAULT_ITERATIONS
    if salt_length is None:
        salt_length = config.salt_length if config is not None else DEFAULT_SALT_LENGTH
    if user_id is None:
        user_id = UserId.new()
    salt = generate_salt(salt_length)
    return UserRecord(
        user_id=user_id,
        password_iterations=iterations,
        password_salt=salt,
        password_hash=derive(iterations, salt, password),
    )


def needs_rehash(
    record: UserRecord,
    iterations: int | None = None,
    *,
    config: CredcheckConfig | None = None,
) -> bool:
    """True if *record* was derived with a lower work factor than configured."""
    if iterations is None:
        iterations = config.password_iterations if config is not None else DEFAULT_ITERATIONS
    return record.password_iterations < iterations
