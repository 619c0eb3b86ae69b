"""Unit tests for the authentication use cases."""

from unittest.mock import patch
from urllib.parse import parse_qs, urlsplit

import pytest
from dishka import AsyncContainer

from sso.adapter.govbr import MappingSessionContext, MockGovBrOAuthClient
from sso.application.usecase.auth import (
    CompleteLoginUseCase,
    GetCurrentUserUseCase,
    LogoutUseCase,
    StartLoginUseCase,
)
from sso.domain.service import GovBrOAuthClient
from sso.domain.value import CallbackParams
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def state_of(url: str) -> str:
    return parse_qs(urlsplit(url).query)["state"][0]


class TestAuthUseCases:
    """Tests for the login, lookup and logout use cases."""

    @pytest.mark.asyncio
    async def test_start_login_uses_configured_provider(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(StartLoginUseCase)
        session = MappingSessionContext({})

        response = await use_case.execute(session)

        assert response.authorization_url.startswith(
            "https://idp.test/authorize?response_type=code&client_id=abc&"
        )
        assert session.get_security_context() is not None

    @pytest.mark.asyncio
    async def test_full_login_then_logout(self, unit_env: AsyncContainer):
        start = await unit_env.get(StartLoginUseCase)
        complete = await unit_env.get(CompleteLoginUseCase)
        current_user = await unit_env.get(GetCurrentUserUseCase)
        logout = await unit_env.get(LogoutUseCase)
        oauth_client = await unit_env.get(GovBrOAuthClient)
        assert isinstance(oauth_client, MockGovBrOAuthClient)
        session = MappingSessionContext({})

        login = await start.execute(session)
        outcome = await complete.execute(
            CallbackParams(code="code-1", state=state_of(login.authorization_url)),
            session,
        )

        assert outcome.kind == "redirect"
        assert await current_user.execute(session) == oauth_client.user

        response = await logout.execute(session)

        assert response.end_session_url == (
            "https://idp.test/logout"
            "?post_logout_redirect_uri=https%3A%2F%2Fapp.test%2Fbye"
        )
        assert await current_user.execute(session) is None

    @pytest.mark.asyncio
    async def test_provider_error_is_returned(self, unit_env: AsyncContainer):
        start = await unit_env.get(StartLoginUseCase)
        complete = await unit_env.get(CompleteLoginUseCase)
        session = MappingSessionContext({})
        await start.execute(session)

        outcome = await complete.execute(
            CallbackParams(error="access_denied", error_description="User denied"),
            session,
        )

        assert outcome.kind == "error"
        assert outcome.error == "access_denied"

    @pytest.mark.asyncio
    async def test_logout_with_corrupt_identity_logs_no_decode_error(
        self, unit_env: AsyncContainer
    ):
        logout = await unit_env.get(LogoutUseCase)
        store = {"user": "{not json"}

        with patch("sso.domain.service.auth_service.logfire.error") as log_error:
            response = await logout.execute(MappingSessionContext(store))

        log_error.assert_not_called()
        assert store == {}
        assert response.end_session_url.startswith("https://idp.test/logout?")
