"""Dependency injection module."""

from sso.util.di.application import ProdApplicationProvider
from sso.util.di.base import Component, ProviderBase
from sso.util.di.core import ProdConfigProvider
from sso.util.di.domain import ProdDomainProvider
from sso.util.di.infrastructure import GovBrProvider, ProdGovBrProvider

# One entry per layer; mockable components are listed by their base class
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    GovBrProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
]


def mockable_components() -> set[Component]:
    """Names of every component that has a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_mockable() and base.__mock_component__
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "GovBrProvider",
    "ProdGovBrProvider",
]
