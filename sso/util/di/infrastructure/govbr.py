"""gov.br infrastructure providers."""

from dishka import Scope, provide

from sso.adapter.govbr.client import RealGovBrOAuthClient
from sso.config import GovBrSettings
from sso.domain.service import GovBrOAuthClient
from sso.util.di.base import ProviderBase
from sso.util.error import ConfigurationError

PLACEHOLDER = "CHANGE_ME_IN_PRODUCTION"


class GovBrProvider(ProviderBase):
    """gov.br component base."""

    __mock_component__ = "govbr"


class ProdGovBrProvider(GovBrProvider):
    """Production gov.br provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_govbr_oauth_client(self, govbr_settings: GovBrSettings) -> GovBrOAuthClient:
        """Provide gov.br OAuth client.

        Returns:
            gov.br OAuth 2.0 client

        Raises:
            ConfigurationError: If client credentials are not configured
        """
        if govbr_settings.client_id in ("", PLACEHOLDER):
            raise ConfigurationError("gov.br client ID must be configured")
        if govbr_settings.client_secret in ("", PLACEHOLDER):
            raise ConfigurationError("gov.br client secret must be configured")

        return RealGovBrOAuthClient(settings=govbr_settings)
