"""Unit tests for the gov.br OAuth client."""

import base64
from urllib.parse import parse_qs

import httpx
import pytest

from sso.domain.error import TokenExchangeError, UserInfoError
from sso.adapter.govbr import MockGovBrOAuthClient, RealGovBrOAuthClient
from sso.config import GovBrSettings
from sso.domain.model import GovBrUser


def client_for(settings: GovBrSettings, handler) -> RealGovBrOAuthClient:
    return RealGovBrOAuthClient(
        settings=settings, transport=httpx.MockTransport(handler)
    )


class TestExchangeCode:
    """Tests for exchange_code method."""

    @pytest.mark.asyncio
    async def test_posts_form_with_basic_auth(self, govbr_settings: GovBrSettings):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "access_token": "tok1",
                    "token_type": "Bearer",
                    "expires_in": 3600,
                    "scope": "openid profile",
                    "unknown_field": "ignored",
                },
            )

        tokens = await client_for(govbr_settings, handler).exchange_code(
            "code-1", "v" * 43
        )

        assert tokens.access_token == "tok1"
        assert tokens.expires_in == 3600
        assert tokens.id_token is None

        (request,) = seen
        assert request.method == "POST"
        assert str(request.url) == "https://idp.test/token"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        expected_auth = base64.b64encode(b"abc:s3cret").decode()
        assert request.headers["Authorization"] == f"Basic {expected_auth}"
        form = parse_qs(request.content.decode())
        assert form == {
            "grant_type": ["authorization_code"],
            "code": ["code-1"],
            "redirect_uri": ["https://app.test/openid"],
            "code_verifier": ["v" * 43],
        }

    @pytest.mark.asyncio
    async def test_error_status_raises(self, govbr_settings: GovBrSettings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": "invalid_grant"})

        with pytest.raises(TokenExchangeError) as exc_info:
            await client_for(govbr_settings, handler).exchange_code("code-1", "v" * 43)

        assert exc_info.value.status_code == 400
        assert "invalid_grant" in exc_info.value.body

    @pytest.mark.asyncio
    async def test_missing_access_token_raises(self, govbr_settings: GovBrSettings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"token_type": "Bearer"})

        with pytest.raises(TokenExchangeError):
            await client_for(govbr_settings, handler).exchange_code("code-1", "v" * 43)

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self, govbr_settings: GovBrSettings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        with pytest.raises(TokenExchangeError):
            await client_for(govbr_settings, handler).exchange_code("code-1", "v" * 43)

    @pytest.mark.asyncio
    async def test_timeout_raises(self, govbr_settings: GovBrSettings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TokenExchangeError):
            await client_for(govbr_settings, handler).exchange_code("code-1", "v" * 43)

    @pytest.mark.asyncio
    async def test_connection_error_raises(self, govbr_settings: GovBrSettings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(TokenExchangeError):
            await client_for(govbr_settings, handler).exchange_code("code-1", "v" * 43)


class TestFetchUserinfo:
    """Tests for fetch_userinfo method."""

    @pytest.mark.asyncio
    async def test_sends_bearer_token(self, govbr_settings: GovBrSettings):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "sub": "12345678900",
                    "name": "Maria",
                    "email": "maria@example.com",
                    "email_verified": True,
                    "phone_number_verified": None,
                },
            )

        user = await client_for(govbr_settings, handler).fetch_userinfo("tok1")

        assert user == GovBrUser(
            subject="12345678900",
            name="Maria",
            email="maria@example.com",
            email_verified=True,
        )
        (request,) = seen
        assert request.method == "GET"
        assert str(request.url) == "https://idp.test/userinfo"
        assert request.headers["Authorization"] == "Bearer tok1"

    @pytest.mark.asyncio
    async def test_unauthorized_raises(self, govbr_settings: GovBrSettings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401)

        with pytest.raises(UserInfoError) as exc_info:
            await client_for(govbr_settings, handler).fetch_userinfo("tok1")

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_missing_subject_raises(self, govbr_settings: GovBrSettings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"name": "Maria"})

        with pytest.raises(UserInfoError):
            await client_for(govbr_settings, handler).fetch_userinfo("tok1")

    @pytest.mark.asyncio
    async def test_timeout_raises(self, govbr_settings: GovBrSettings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(UserInfoError):
            await client_for(govbr_settings, handler).fetch_userinfo("tok1")


class TestMockGovBrOAuthClient:
    """Tests for the mock client used by the test container."""

    @pytest.mark.asyncio
    async def test_records_calls(self):
        client = MockGovBrOAuthClient()

        tokens = await client.exchange_code("code-1", "verifier")
        await client.fetch_userinfo(tokens.access_token)

        assert client.exchange_calls == [("code-1", "verifier")]
        assert client.userinfo_calls == ["mock-access-token"]
        assert client.call_count == 2

    @pytest.mark.asyncio
    async def test_raises_configured_error(self):
        client = MockGovBrOAuthClient(token_error=TokenExchangeError("down"))

        with pytest.raises(TokenExchangeError):
            await client.exchange_code("code-1", "verifier")
