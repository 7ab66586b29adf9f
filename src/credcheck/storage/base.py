"""User lookup protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from credcheck.core.types import Username, UserRecord


@runtime_checkable
class UserFinder(Protocol):
    """Something that can find a user by username.

    Implementations return ``None`` when no account matches and raise their
    own exception type only when the store itself fails. Calls must be safe
    from concurrent callers and must not be memoized.
    """

    def find_user(self, username: Username) -> UserRecord | None:
        """Return the record stored under *username*, or ``None``."""
        ...
