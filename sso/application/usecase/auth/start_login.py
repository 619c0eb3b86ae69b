"""Start login use case."""

import logfire
from pydantic import BaseModel

from sso.domain.service import AuthService, SessionContext


class StartLoginResponse(BaseModel):
    """Start login response."""

    authorization_url: str


class StartLoginUseCase:
    """Use case for sending a citizen to the gov.br login page."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize start login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, session: SessionContext) -> StartLoginResponse:
        """Create a new login attempt in the session.

        Any attempt already pending in the session is replaced.

        Args:
            session: The user's session

        Returns:
            Authorization URL to redirect to
        """
        with logfire.span("start_login"):
            url = self.auth_service.build_login_url(session)
            return StartLoginResponse(authorization_url=url)
