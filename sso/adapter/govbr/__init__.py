"""gov.br OAuth adapter."""

from .client import MockGovBrOAuthClient, RealGovBrOAuthClient
from .session import MappingSessionContext

__all__ = ["MappingSessionContext", "MockGovBrOAuthClient", "RealGovBrOAuthClient"]
