"""Get current user use case."""

from sso.domain.model import GovBrUser
from sso.domain.service import AuthService, SessionContext


class GetCurrentUserUseCase:
    """Use case for getting the citizen logged into the session."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, session: SessionContext) -> GovBrUser | None:
        """Return the logged-in citizen, or None when not authenticated."""
        return self.auth_service.get_user(session)
