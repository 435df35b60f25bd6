"""
In-memory store of editing sessions.

Sessions expire after ``session_ttl_seconds`` of inactivity and nothing is
persisted. Each session is owned by one client; no state is shared between
sessions.
"""

from typing import Optional
from uuid import uuid4

import logfire
from cachetools import TTLCache

from config import settings
from pipeline.editing.session import EditingSession


class SessionNotFoundError(KeyError):
    """Raised when a session ID is unknown or has expired."""
    pass


class SessionStore:
    """TTL-bounded mapping of session ID to EditingSession."""

    def __init__(self, maxsize: Optional[int] = None, ttl: Optional[float] = None):
        self._sessions: TTLCache = TTLCache(
            maxsize=maxsize or settings.max_sessions,
            ttl=ttl or settings.session_ttl_seconds,
        )

    def create(self, session_id: Optional[str] = None, sender_name: str = "") -> EditingSession:
        session = EditingSession(session_id=session_id or str(uuid4()), sender_name=sender_name)
        self._sessions[session.session_id] = session
        logfire.info("Editing session created", session_id=session.session_id)
        return session

    def get(self, session_id: str) -> EditingSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        # Re-insert to refresh the TTL on access
        self._sessions[session_id] = session
        return session

    def get_or_create(self, session_id: Optional[str] = None, sender_name: str = "") -> EditingSession:
        if session_id:
            try:
                return self.get(session_id)
            except SessionNotFoundError:
                pass
        return self.create(session_id=session_id, sender_name=sender_name)

    def __len__(self) -> int:
        return len(self._sessions)


_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get or create the session store singleton."""
    global _session_store

    if _session_store is None:
        _session_store = SessionStore()

    return _session_store
