"""ID token utilities."""

from typing import Any

import jwt


class JWTError(Exception):
    """JWT-related error."""

    pass


def read_id_token_claims(id_token: str) -> dict[str, Any]:
    """Decode an id_token's claims without verifying its signature.

    The token arrives over the TLS back channel straight from the token
    endpoint, so only the claims are read here (for the nonce check).

    Args:
        id_token: Compact-serialized JWT from the token response

    Returns:
        Claims dictionary

    Raises:
        JWTError: If the token is not a decodable JWT
    """
    try:
        return jwt.decode(id_token, options={"verify_signature": False})
    except jwt.InvalidTokenError:
        raise JWTError("Invalid id_token")
