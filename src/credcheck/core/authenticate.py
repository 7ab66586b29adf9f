"""Find a user and check the password against theirs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from credcheck.core.passwords import verify
from credcheck.core.types import Response, UserId

if TYPE_CHECKING:
    from credcheck.storage.base import UserFinder

log = logging.getLogger(__name__)


def authenticate(finder: UserFinder, response: Response) -> UserId | None:
    """Return the matching ``UserId``, or ``None`` if not authenticated.

    An unknown username and a wrong password both yield ``None``. Exceptions
    raised by ``finder.find_user`` reach the caller unchanged.
    """
    record = finder.find_user(response.username)
    if record is None or not verify(record, response.password):
        log.debug("Authentication rejected for %s", response.username)
        return None
    log.debug("Authenticated %s as %s", response.username, record.user_id)
    return record.user_id
