"""Session context backed by the host's per-user session mapping."""

import logging
from collections.abc import MutableMapping
from typing import Any

from pydantic import ValidationError

from sso.domain.model import GovBrUser
from sso.domain.value import SecurityContext

logger = logging.getLogger(__name__)

STATE_KEY = "oauth_state"
NONCE_KEY = "oauth_nonce"
CODE_VERIFIER_KEY = "code_verifier"
USER_KEY = "user"

_SECURITY_KEYS = (STATE_KEY, NONCE_KEY, CODE_VERIFIER_KEY)


class MappingSessionContext:
    """SessionContext over a mutable mapping.

    Works with ``request.session`` (loaded from the server-side session
    store) and with a plain dict in tests. Only JSON-compatible values are
    written so any store can hold them. The
    string keys stay private to this class.

    Attributes:
        _session: The host's session mapping
    """

    def __init__(self, session: MutableMapping[str, Any]) -> None:
        """Wrap a session mapping.

        Args:
            session: Mapping owned by the host session mechanism
        """
        self._session = session

    def save_security_context(self, context: SecurityContext) -> None:
        """Store state, nonce and verifier, replacing any previous attempt."""
        self._session[STATE_KEY] = context.state
        self._session[NONCE_KEY] = context.nonce
        self._session[CODE_VERIFIER_KEY] = context.code_verifier

    def get_security_context(self) -> SecurityContext | None:
        """Read the pending context without consuming it.

        Returns:
            The context, or None if absent or malformed
        """
        if not all(key in self._session for key in _SECURITY_KEYS):
            return None

        try:
            return SecurityContext(
                state=self._session[STATE_KEY],
                nonce=self._session[NONCE_KEY],
                code_verifier=self._session[CODE_VERIFIER_KEY],
            )
        except ValidationError:
            logger.warning("Ignoring malformed security context in session")
            return None

    def pop_security_context(self) -> SecurityContext | None:
        """Read and remove the pending context."""
        context = self.get_security_context()
        self.discard_security_context()
        return context

    def discard_security_context(self) -> None:
        for key in _SECURITY_KEYS:
            self._session.pop(key, None)

    def set_user(self, user: GovBrUser) -> None:
        self._session[USER_KEY] = user.model_dump(mode="json", by_alias=True)

    def get_user_entry(self) -> Any:
        return self._session.get(USER_KEY)

    def invalidate(self) -> None:
        self._session.clear()
