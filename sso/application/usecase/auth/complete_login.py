"""Complete login use case."""

import logfire

from sso.domain.service import AuthService, SessionContext
from sso.domain.value import CallbackOutcome, CallbackParams


class CompleteLoginUseCase:
    """Use case for handling the gov.br redirect back to the application."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize complete login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(
        self, request: CallbackParams, session: SessionContext
    ) -> CallbackOutcome:
        """Execute the callback flow.

        Steps:
        1. Short-circuit on a provider-reported error
        2. Validate state against the pending login attempt
        3. Exchange the code and fetch userinfo
        4. Store the identity in the session

        Args:
            request: Callback query parameters
            session: The user's session

        Returns:
            Tagged outcome for the interface layer to render

        Raises:
            SecurityViolationError: If the state (or nonce) check fails
            TokenExchangeError: If the token exchange fails
            UserInfoError: If userinfo fails
        """
        with logfire.span("complete_login", has_error=bool(request.error)):
            outcome = await self.auth_service.handle_callback(request, session)

            if outcome.kind == "redirect":
                logfire.info("Citizen logged in", redirect=outcome.url)

            return outcome
