"""Application layer DI providers."""

from dishka import Scope, provide

from sso.application.usecase.auth import (
    CompleteLoginUseCase,
    GetCurrentUserUseCase,
    LogoutUseCase,
    StartLoginUseCase,
)
from sso.domain.service import AuthService
from sso.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_start_login_use_case(self, auth_service: AuthService) -> StartLoginUseCase:
        """Provide start login use case."""
        return StartLoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_complete_login_use_case(
        self, auth_service: AuthService
    ) -> CompleteLoginUseCase:
        """Provide complete login use case."""
        return CompleteLoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, auth_service: AuthService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(self, auth_service: AuthService) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(auth_service=auth_service)
