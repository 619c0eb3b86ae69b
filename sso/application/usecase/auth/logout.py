"""Logout use case."""

import logfire
from pydantic import BaseModel

from sso.domain.service import AuthService, SessionContext


class LogoutResponse(BaseModel):
    """Logout response."""

    end_session_url: str


class LogoutUseCase:
    """Use case for ending the local session and the gov.br session."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize logout use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, session: SessionContext) -> LogoutResponse:
        """Invalidate the session.

        Args:
            session: The user's session

        Returns:
            gov.br end-session URL to redirect to
        """
        had_user = session.get_user_entry() is not None
        url = self.auth_service.logout(session)
        logfire.info("Session invalidated", had_user=had_user)
        return LogoutResponse(end_session_url=url)
