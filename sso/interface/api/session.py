"""Session middleware keeping session data on the server.

The cookie carries only a signed, opaque session id. ``request.session`` is
loaded from the store before the endpoint runs and written back when the
response starts. A session emptied during the request (logout) is deleted
from the store, which revokes the cookie everywhere it was copied.
"""

import logging

import itsdangerous
from itsdangerous.exc import BadSignature
from starlette.datastructures import MutableHeaders
from starlette.requests import HTTPConnection
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from sso.adapter.session import SessionStore

logger = logging.getLogger(__name__)


class ServerSessionMiddleware:
    """ASGI middleware backing ``request.session`` with a SessionStore."""

    def __init__(
        self,
        app: ASGIApp,
        store: SessionStore,
        secret_key: str,
        session_cookie: str = "session",
        max_age: int = 8 * 60 * 60,
        same_site: str = "lax",
        https_only: bool = False,
    ) -> None:
        self.app = app
        self.store = store
        self.signer = itsdangerous.TimestampSigner(secret_key)
        self.session_cookie = session_cookie
        self.max_age = max_age
        self.security_flags = f"httponly; samesite={same_site}"
        if https_only:
            self.security_flags += "; secure"

    def _read_session_id(self, connection: HTTPConnection) -> str | None:
        cookie = connection.cookies.get(self.session_cookie)
        if not cookie:
            return None
        try:
            return self.signer.unsign(cookie, max_age=self.max_age).decode("utf-8")
        except BadSignature:
            logger.warning("Ignoring session cookie with a bad or expired signature")
            return None

    def _cookie_header(self, value: str, expire: bool = False) -> str:
        lifetime = (
            "expires=Thu, 01 Jan 1970 00:00:00 GMT"
            if expire
            else f"Max-Age={self.max_age}"
        )
        return (
            f"{self.session_cookie}={value}; path=/; {lifetime}; {self.security_flags}"
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        connection = HTTPConnection(scope)
        had_cookie = self.session_cookie in connection.cookies

        session_id = self._read_session_id(connection)
        data = await self.store.get(session_id) if session_id else None
        if data is None:
            # Unknown, expired or revoked ids are never reused
            session_id = None
        scope["session"] = data or {}

        async def send_wrapper(message: Message) -> None:
            nonlocal session_id
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                session = scope["session"]
                if session:
                    if session_id is None:
                        session_id = await self.store.create(session)
                    else:
                        await self.store.save(session_id, session)
                    signed = self.signer.sign(session_id).decode("utf-8")
                    headers.append("Set-Cookie", self._cookie_header(signed))
                else:
                    if session_id is not None:
                        await self.store.delete(session_id)
                    if had_cookie:
                        headers.append(
                            "Set-Cookie", self._cookie_header("null", expire=True)
                        )
            await send(message)

        await self.app(scope, receive, send_wrapper)
