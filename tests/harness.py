"""Fixture factories shared by the unit and E2E tests."""

import pytest_asyncio

from sso.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture yielding a request-scoped container.

    gov.br is mocked unless named in ``unmock``. The container is closed
    when the test finishes.

    Args:
        unmock: Components to run with their production implementation

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_start_login(unit_env):
            use_case = await unit_env.get(StartLoginUseCase)
            response = await use_case.execute(MappingSessionContext({}))
            assert response.authorization_url.startswith("https://idp.test")
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        async with container() as request_container:
            yield request_container
        await container.close()

    return _env
