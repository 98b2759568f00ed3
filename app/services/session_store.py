"""Session-keyed store of conversation state.

Owned by the caller and injected into the accumulator. Each session has its
own lock so that concurrent updates to one session are serialized while
different sessions never contend.
"""

import threading
from dataclasses import dataclass, field

from app.core.exceptions import UnknownSessionError
from app.models.conversation import ConversationState


@dataclass
class SessionEntry:
    """Mutable state for one session plus the lock guarding it."""

    state: ConversationState = field(default_factory=ConversationState)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class SessionStore:
    """In-memory mapping of session id to SessionEntry.

    The store-level lock only guards creation and lookup of entries.
    State mutation happens under the per-session lock.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, SessionEntry] = {}
        self._lock = threading.Lock()

    def get_or_create(self, session_id: str) -> SessionEntry:
        """Get a session entry, creating it on first use."""
        with self._lock:
            entry = self._sessions.get(session_id)
            if entry is None:
                entry = SessionEntry()
                self._sessions[session_id] = entry
            return entry

    def get(self, session_id: str) -> SessionEntry:
        """Get an existing session entry.

        Raises:
            UnknownSessionError: If the session was never created
        """
        with self._lock:
            entry = self._sessions.get(session_id)
        if entry is None:
            raise UnknownSessionError(session_id)
        return entry

    def remove(self, session_id: str) -> SessionEntry:
        """Remove a session entry and return it.

        Raises:
            UnknownSessionError: If the session was never created or was already removed
        """
        with self._lock:
            entry = self._sessions.pop(session_id, None)
        if entry is None:
            raise UnknownSessionError(session_id)
        return entry

    def exists(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
