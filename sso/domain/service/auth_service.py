"""Authentication domain service.

Runs the gov.br Authorization Code + PKCE flow against a user's session:

    build_login_url  -> pending SecurityContext stored, browser sent to gov.br
    handle_callback  -> state checked, code exchanged, identity stored
    get_user         -> identity read back from the session
    logout           -> session destroyed, browser sent to gov.br end-session
"""

from typing import Any, Protocol
from urllib.parse import urlencode

import logfire

from sso.config import GovBrSettings
from sso.domain.error import (
    SecurityViolationError,
    SessionDecodeError,
    TokenExchangeError,
)
from sso.domain.model import GovBrUser
from sso.domain.service.user_resolver import decode_user
from sso.domain.value import (
    CallbackOutcome,
    CallbackParams,
    ProviderErrorOutcome,
    RedirectOutcome,
    SecurityContext,
    TokenResponse,
)
from sso.util.jwt import JWTError, read_id_token_claims
from sso.util.pkce import generate_pkce_pair
from sso.util.tokens import generate_nonce, generate_state, tokens_match


# Where the browser lands after a successful login
POST_LOGIN_REDIRECT = "/"


class GovBrOAuthClient:
    """Back-channel calls to the gov.br provider."""

    async def exchange_code(self, code: str, code_verifier: str) -> TokenResponse:
        """Exchange an authorization code for tokens.

        Args:
            code: Authorization code from the callback
            code_verifier: PKCE verifier of the login attempt

        Returns:
            Token response containing at least an access token
        """
        raise NotImplementedError

    async def fetch_userinfo(self, access_token: str) -> GovBrUser:
        """Fetch the authenticated citizen's claims.

        Args:
            access_token: Bearer token from the exchange

        Returns:
            Decoded identity
        """
        raise NotImplementedError


class SessionContext(Protocol):
    """Per-user session capability supplied by the host.

    Exposes exactly the pending security context and the authenticated
    identity. Serializing concurrent requests for the same session is the
    host session mechanism's job.
    """

    def save_security_context(self, context: SecurityContext) -> None: ...

    def get_security_context(self) -> SecurityContext | None: ...

    def pop_security_context(self) -> SecurityContext | None: ...

    def discard_security_context(self) -> None: ...

    def set_user(self, user: GovBrUser) -> None: ...

    def get_user_entry(self) -> Any: ...

    def invalidate(self) -> None: ...


class AuthService:
    """Domain service for gov.br login, user lookup and logout.

    Holds no mutable state; everything per-user lives in the SessionContext
    passed to each call.
    """

    def __init__(self, oauth_client: GovBrOAuthClient, settings: GovBrSettings) -> None:
        """Initialize auth service.

        Args:
            oauth_client: gov.br back-channel client
            settings: Provider endpoints and client registration
        """
        self.oauth_client = oauth_client
        self.settings = settings

    def build_login_url(self, session: SessionContext) -> str:
        """Start a login attempt.

        Generates state, nonce and a PKCE pair, stores them in the session
        and returns the gov.br authorization URL.

        Args:
            session: The user's session

        Returns:
            Absolute authorization URL

        Raises:
            DigestUnavailableError: If SHA-256 is unavailable
        """
        code_verifier, code_challenge = generate_pkce_pair()
        context = SecurityContext(
            state=generate_state(),
            nonce=generate_nonce(),
            code_verifier=code_verifier,
        )

        # Must be stored before the browser can reach the callback
        session.save_security_context(context)

        params = {
            "response_type": "code",
            "client_id": self.settings.client_id,
            "scope": self.settings.scopes,
            "redirect_uri": self.settings.redirect_uri,
            "nonce": context.nonce,
            "state": context.state,
            "code_challenge": code_challenge,
            "code_challenge_method": "S256",
        }

        logfire.info(
            "gov.br authorization initiated",
            redirect_uri=self.settings.redirect_uri,
            scopes=self.settings.scopes,
        )

        return f"{self.settings.authorize_url}?{urlencode(params)}"

    async def handle_callback(
        self, params: CallbackParams, session: SessionContext
    ) -> CallbackOutcome:
        """Complete a login attempt from the gov.br redirect.

        The pending security context is consumed whatever the result, so a
        callback can never be replayed.

        Args:
            params: Callback query parameters
            session: The user's session

        Returns:
            RedirectOutcome on success, ProviderErrorOutcome if gov.br
            reported an error

        Raises:
            SecurityViolationError: On state mismatch, missing login attempt
                or id_token nonce mismatch
            TokenExchangeError: If the code cannot be exchanged
            UserInfoError: If the identity cannot be fetched or decoded
        """
        if params.error is not None:
            session.discard_security_context()
            logfire.warn(
                "gov.br returned an error on callback",
                error=params.error,
                error_description=params.error_description,
            )
            return ProviderErrorOutcome(
                error=params.error,
                error_description=params.error_description,
                state=params.state,
            )

        context = session.pop_security_context()
        if context is None:
            logfire.warn("Callback without a pending login attempt")
            raise SecurityViolationError("state mismatch")
        if not tokens_match(context.state, params.state):
            logfire.warn("Callback state does not match the pending login attempt")
            raise SecurityViolationError("state mismatch")

        if not params.code:
            raise TokenExchangeError("Callback has no authorization code")

        with logfire.span("govbr.complete_login"):
            tokens = await self.oauth_client.exchange_code(
                params.code, context.code_verifier
            )
            self._check_nonce(tokens, context)

            user = await self.oauth_client.fetch_userinfo(tokens.access_token)
            session.set_user(user)

        logfire.info("gov.br login completed", email_verified=user.email_verified)
        return RedirectOutcome(url=POST_LOGIN_REDIRECT)

    def _check_nonce(self, tokens: TokenResponse, context: SecurityContext) -> None:
        """Match the id_token nonce claim against the login attempt.

        Skipped when the provider sent no id_token or the check is disabled.
        """
        if not tokens.id_token or not self.settings.verify_nonce:
            return

        try:
            claims = read_id_token_claims(tokens.id_token)
        except JWTError as e:
            raise TokenExchangeError("Token response has an unreadable id_token") from e

        if not tokens_match(context.nonce, claims.get("nonce")):
            logfire.warn("id_token nonce does not match the pending login attempt")
            raise SecurityViolationError("nonce mismatch")

    def get_user(self, session: SessionContext) -> GovBrUser | None:
        """Return the authenticated user, or None if nobody is logged in.

        A stored entry that cannot be decoded is logged and treated as
        logged out.

        Args:
            session: The user's session

        Returns:
            Identity, or None
        """
        raw = session.get_user_entry()
        if raw is None:
            return None

        try:
            return decode_user(raw)
        except SessionDecodeError as e:
            logfire.error("Error deserializing user from session", error=str(e))
            return None

    def logout(self, session: SessionContext) -> str:
        """Destroy the local session and build the gov.br end-session URL.

        Args:
            session: The user's session

        Returns:
            End-session URL with post_logout_redirect_uri
        """
        session.invalidate()

        query = urlencode({"post_logout_redirect_uri": self.settings.logout_uri})
        return f"{self.settings.end_session_url}?{query}"
