"""Domain value objects for the gov.br login flow."""

from sso.domain.value.types import (
    CallbackOutcome,
    CallbackParams,
    ProviderErrorOutcome,
    RedirectOutcome,
    SecurityContext,
    TokenResponse,
)

__all__ = [
    "CallbackOutcome",
    "CallbackParams",
    "ProviderErrorOutcome",
    "RedirectOutcome",
    "SecurityContext",
    "TokenResponse",
]
