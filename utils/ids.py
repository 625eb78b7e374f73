# Generate per-process session identifiers for account logins.
from __future__ import annotations

import logging
import threading

SESSION_ID_PREFIX = "sessionId_"

logger = logging.getLogger(__name__)


class SessionIdGenerator:
    """Issue ids of the form ``sessionId_<counter>_<account name>``.

    The counter starts at zero for every instance and only ever moves
    forward. It lives in memory, so a restarted process hands out the same
    ids again. Ids are unique per instance, not unguessable.
    """

    def __init__(self) -> None:
        self._counter = 0
        self._lock = threading.Lock()

    def generate(self, account_name: str) -> str:
        """Return the next session id for ``account_name`` (used verbatim)."""
        with self._lock:
            value = self._counter
            self._counter += 1
        logger.debug("Issued session counter %d for account %r", value, account_name)
        return f"{SESSION_ID_PREFIX}{value}_{account_name}"

    # Name used by the authentication flow that consumes the generator.
    generate_session_id = generate
