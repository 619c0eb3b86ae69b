"""gov.br OAuth 2.0 back-channel client.

Implements the two server-to-server calls of the Authorization Code flow:
the code-for-token exchange and the userinfo lookup.
"""

import logging

import httpx
import logfire
from pydantic import ValidationError

from sso.domain.error import TokenExchangeError, UserInfoError
from sso.config import GovBrSettings
from sso.domain.model import GovBrUser
from sso.domain.service.auth_service import GovBrOAuthClient
from sso.domain.value import TokenResponse

logger = logging.getLogger(__name__)


class RealGovBrOAuthClient(GovBrOAuthClient):
    """gov.br client over httpx.

    Authenticates to the token endpoint with HTTP Basic client credentials
    (``client_secret_basic``). No call is retried.
    """

    def __init__(
        self,
        settings: GovBrSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize gov.br OAuth client.

        Args:
            settings: Provider endpoints and client credentials
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self._settings = settings
        self._transport = transport

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=self._settings.http_timeout,
        )

    async def exchange_code(self, code: str, code_verifier: str) -> TokenResponse:
        """Exchange an authorization code for tokens.

        Args:
            code: Authorization code from the callback
            code_verifier: PKCE verifier stored when the login started

        Returns:
            Parsed token response

        Raises:
            TokenExchangeError: On transport failure, timeout, non-2xx status,
                or a body without an access_token
        """
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self._settings.redirect_uri,
            "code_verifier": code_verifier,
        }
        auth = httpx.BasicAuth(self._settings.client_id, self._settings.client_secret)

        try:
            async with self._http_client() as client:
                response = await client.post(
                    self._settings.token_url,
                    data=data,
                    auth=auth,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except httpx.TimeoutException as e:
            logfire.error("gov.br token exchange timed out", error=str(e))
            raise TokenExchangeError(f"Token exchange timed out: {e}") from e
        except httpx.HTTPError as e:
            logfire.error("gov.br token exchange HTTP error", error=str(e))
            raise TokenExchangeError(f"HTTP error during token exchange: {e}") from e

        if not response.is_success:
            logfire.error(
                "gov.br token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise TokenExchangeError(
                f"Token exchange failed: {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            token_response = TokenResponse.model_validate_json(response.content)
        except ValidationError as e:
            # The body holds tokens on success, so it is kept off the log line
            logger.error(
                f"Unreadable token response (status {response.status_code}): "
                f"{e.error_count()} validation error(s)"
            )
            raise TokenExchangeError(
                "Token response has no access_token",
                status_code=response.status_code,
                body=response.text,
            ) from e

        logger.info(f"Token exchange succeeded (status {response.status_code})")
        return token_response

    async def fetch_userinfo(self, access_token: str) -> GovBrUser:
        """Fetch the citizen's claims from the userinfo endpoint.

        Args:
            access_token: Bearer token from the token exchange

        Returns:
            Decoded identity

        Raises:
            UserInfoError: On transport failure, timeout, non-2xx status, or a
                body that does not decode into a GovBrUser
        """
        try:
            async with self._http_client() as client:
                response = await client.get(
                    self._settings.userinfo_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.TimeoutException as e:
            logfire.error("gov.br userinfo request timed out", error=str(e))
            raise UserInfoError(f"Userinfo request timed out: {e}") from e
        except httpx.HTTPError as e:
            logfire.error("gov.br userinfo HTTP error", error=str(e))
            raise UserInfoError(f"HTTP error fetching userinfo: {e}") from e

        if not response.is_success:
            logfire.error(
                "gov.br userinfo request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise UserInfoError(
                f"Userinfo request failed: {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            return GovBrUser.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(
                f"Userinfo response is not a valid identity: "
                f"{e.error_count()} validation error(s)"
            )
            raise UserInfoError(
                "Userinfo response could not be decoded",
                status_code=response.status_code,
                body=response.text,
            ) from e


class MockGovBrOAuthClient(GovBrOAuthClient):
    """Mock gov.br client for testing.

    Returns deterministic data without network calls and counts how many
    times each endpoint was hit. Pass an exception to make a call fail.
    """

    def __init__(
        self,
        token_response: TokenResponse | None = None,
        user: GovBrUser | None = None,
        token_error: Exception | None = None,
        userinfo_error: Exception | None = None,
    ) -> None:
        self.token_response = token_response or TokenResponse(
            access_token="mock-access-token", token_type="Bearer", expires_in=3600
        )
        self.user = user or GovBrUser(
            subject="12345678900",
            name="Mock Citizen",
            email="mock@example.gov.br",
            email_verified=True,
        )
        self.token_error = token_error
        self.userinfo_error = userinfo_error
        self.exchange_calls: list[tuple[str, str]] = []
        self.userinfo_calls: list[str] = []

    @property
    def call_count(self) -> int:
        """Total number of provider calls made."""
        return len(self.exchange_calls) + len(self.userinfo_calls)

    async def exchange_code(self, code: str, code_verifier: str) -> TokenResponse:
        self.exchange_calls.append((code, code_verifier))
        if self.token_error:
            raise self.token_error
        return self.token_response

    async def fetch_userinfo(self, access_token: str) -> GovBrUser:
        self.userinfo_calls.append(access_token)
        if self.userinfo_error:
            raise self.userinfo_error
        return self.user
