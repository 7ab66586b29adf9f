"""SQLite user store."""

from __future__ import annotations

import logging
import sqlite3
import uuid
from contextlib import closing
from pathlib import Path

from credcheck.core.types import (
    PasswordHash,
    PasswordSalt,
    UserId,
    Username,
    UserRecord,
    username_key,
)
from credcheck.exceptions import StorageError

log = logging.getLogger(__name__)


class SQLiteUserFinder:
    """Find users by username in a SQLite database."""

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    def _init_db(self) -> None:
        try:
            with closing(self._conn()) as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS users (
                        id TEXT PRIMARY KEY,
                        username TEXT UNIQUE NOT NULL,
                        password_iterations INTEGER NOT NULL,
                        password_salt BLOB NOT NULL,
                        password_hash BLOB NOT NULL,
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                """)
                conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"Could not initialise {self.db_path}: {exc}") from exc

    def _conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA busy_timeout=5000")
        return conn

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_user(self, username: Username) -> UserRecord | None:
        try:
            with closing(self._conn()) as conn:
                row = conn.execute(
                    """
                    SELECT id, password_iterations, password_salt, password_hash
                    FROM users
                    WHERE username = ?
                    """,
                    (username_key(username),),
                ).fetchone()
        except sqlite3.Error as exc:
            log.error("User lookup failed: %s", exc)
            raise StorageError(f"User lookup failed: {exc}") from exc
        if row is None:
            return None
        return _row_to_record(row)

    # ------------------------------------------------------------------
    # Record lifecycle
    # ------------------------------------------------------------------

    def save_user(self, username: Username | str, record: UserRecord) -> None:
        """Insert *record* for *username*, replacing any previous credential."""
        key = username_key(username)
        try:
            with closing(self._conn()) as conn:
                conn.execute(
                    """
                    INSERT INTO users
                        (id, username, password_iterations, password_salt, password_hash)
                    VALUES (?, ?, ?, ?, ?)
                    ON CONFLICT(username) DO UPDATE SET
                        id                  = excluded.id,
                        password_iterations = excluded.password_iterations,
                        password_salt       = excluded.password_salt,
                        password_hash       = excluded.password_hash,
                        updated_at          = CURRENT_TIMESTAMP
                    """,
                    (
                        str(record.user_id),
                        key,
                        record.password_iterations,
                        record.password_salt.root,
                        record.password_hash.root,
                    ),
                )
                conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"Could not save user {key!r}: {exc}") from exc

    def delete_user(self, username: Username | str) -> bool:
        """Delete *username*. Return ``True`` if found."""
        key = username_key(username)
        try:
            with closing(self._conn()) as conn:
                cur = conn.execute("DELETE FROM users WHERE username = ?", (key,))
                conn.commit()
                return cur.rowcount > 0
        except sqlite3.Error as exc:
            raise StorageError(f"Could not delete user {key!r}: {exc}") from exc


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _row_to_record(row: sqlite3.Row) -> UserRecord:
    salt, digest = row["password_salt"], row["password_hash"]
    if not isinstance(salt, bytes) or not isinstance(digest, bytes):
        log.error("Malformed user record %s: salt and hash must be BLOBs", row["id"])
        raise StorageError(f"Malformed user record {row['id']!r}")
    try:
        return UserRecord(
            user_id=UserId(uuid.UUID(str(row["id"]))),
            password_iterations=row["password_iterations"],
            password_salt=PasswordSalt(salt),
            password_hash=PasswordHash(digest),
        )
    except ValueError as exc:  # includes pydantic.ValidationError
        log.error("Malformed user record %s: %s", row["id"], exc)
        raise StorageError(f"Malformed user record {row['id']!r}") from exc
