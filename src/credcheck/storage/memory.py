"""In-memory user finder backed by a dict."""

from __future__ import annotations

from collections.abc import Mapping

from credcheck.core.types import Username, UserRecord, username_key


class InMemoryUserFinder:
    """Find users by username in a mapping. Lookups never fail."""

    def __init__(self, users: Mapping[str, UserRecord] | None = None):
        self._users: dict[str, UserRecord] = dict(users or {})

    def find_user(self, username: Username) -> UserRecord | None:
        return self._users.get(username_key(username))

    def save_user(self, username: Username | str, record: UserRecord) -> None:
        """Insert or replace the record for *username*."""
        self._users[username_key(username)] = record

    def delete_user(self, username: Username | str) -> bool:
        """Remove *username*. Return ``True`` if it existed."""
        return self._users.pop(username_key(username), None) is not None

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, username: object) -> bool:
        if not isinstance(username, (Username, str)):
            return False
        return username_key(username) in self._users
