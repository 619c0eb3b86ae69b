"""Server-side session storage."""

from .store import InMemorySessionStore, SessionRecord, SessionStore

__all__ = ["InMemorySessionStore", "SessionRecord", "SessionStore"]
