"""Domain services."""

from .auth_service import AuthService, GovBrOAuthClient, SessionContext
from .user_resolver import decode_user

__all__ = [
    "AuthService",
    "GovBrOAuthClient",
    "SessionContext",
    "decode_user",
]
