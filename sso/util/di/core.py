"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from sso.config import GovBrSettings, Settings
from sso.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file once, when
    the container first resolves them.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_govbr_settings(self, settings: Settings) -> GovBrSettings:
        """Provide gov.br provider settings."""
        return settings.govbr
