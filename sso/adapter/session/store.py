"""Server-side storage for per-browser session data."""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Protocol

from pydantic import BaseModel

SESSION_ID_BYTES = 32


class SessionRecord(BaseModel):
    """Session data held on the server.

    Attributes:
        data: JSON-compatible session mapping (pending login, identity)
        expires_at: When the record stops being served; pushed forward on
            every save
    """

    data: dict[str, Any]
    expires_at: datetime


class SessionStore(Protocol):
    """Storage keyed by the opaque id carried in the session cookie."""

    async def create(self, data: dict[str, Any]) -> str: ...

    async def save(self, session_id: str, data: dict[str, Any]) -> None: ...

    async def get(self, session_id: str) -> dict[str, Any] | None: ...

    async def delete(self, session_id: str) -> None: ...


class InMemorySessionStore:
    """Per-process session store.

    Deleting a record revokes every copy of its cookie, so a cookie captured
    before logout no longer authenticates. Records expire ``max_age``
    seconds after their last save; expired records are dropped when read
    and swept whenever a new session is created.

    Attributes:
        _sessions: Dict mapping session id → SessionRecord
    """

    def __init__(self, max_age: int) -> None:
        """Initialize empty session store.

        Args:
            max_age: Idle lifetime of a session in seconds
        """
        self.max_age = max_age
        self._sessions: dict[str, SessionRecord] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def _expiry(self) -> datetime:
        return datetime.now(timezone.utc) + timedelta(seconds=self.max_age)

    async def create(self, data: dict[str, Any]) -> str:
        """Store a new session under a fresh random id.

        Returns:
            The new session id
        """
        self.purge_expired()
        session_id = secrets.token_urlsafe(SESSION_ID_BYTES)
        await self.save(session_id, data)
        return session_id

    async def save(self, session_id: str, data: dict[str, Any]) -> None:
        """Replace a session's data and extend its lifetime."""
        self._sessions[session_id] = SessionRecord(
            data=dict(data), expires_at=self._expiry()
        )

    async def get(self, session_id: str) -> dict[str, Any] | None:
        """Return a copy of the session data.

        Automatically deletes expired sessions.
        """
        record = self._sessions.get(session_id)
        if record is None:
            return None

        if record.expires_at < datetime.now(timezone.utc):
            await self.delete(session_id)
            return None

        return dict(record.data)

    async def delete(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def purge_expired(self) -> int:
        """Drop every expired record.

        Returns:
            Number of records removed
        """
        now = datetime.now(timezone.utc)
        expired = [sid for sid, rec in self._sessions.items() if rec.expires_at < now]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)
