"""Domain layer DI providers."""

from dishka import Scope, provide

from sso.config import GovBrSettings
from sso.domain.service import AuthService, GovBrOAuthClient
from sso.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    AuthService keeps no per-user state, so a single APP-scoped instance
    serves every request.
    """

    scope = Scope.APP

    @provide
    def get_auth_service(
        self, oauth_client: GovBrOAuthClient, govbr_settings: GovBrSettings
    ) -> AuthService:
        """Provide gov.br authentication domain service."""
        return AuthService(oauth_client=oauth_client, settings=govbr_settings)
