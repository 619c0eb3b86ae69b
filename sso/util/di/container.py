"""Dependency injection container."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from sso.util.di import PROVIDERS, Component, ProviderBase


def instantiate_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Create one provider per PROVIDERS entry.

    Args:
        mocked: Components to serve from their mock implementation

    Returns:
        Provider instances ready for make_async_container
    """
    return [
        base.implementation(mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the application container.

    Settings are read from the environment the first time they are resolved.
    FastapiProvider exposes the current Request to request-scoped factories.

    Args:
        mocked: Components to replace with mocks (empty in production)

    Returns:
        Configured DI container
    """
    return make_async_container(*instantiate_providers(mocked), FastapiProvider())
