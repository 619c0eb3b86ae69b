"""PKCE (Proof Key for Code Exchange) utilities for OAuth security."""

import hashlib
import secrets
from base64 import urlsafe_b64encode

from sso.util.error import DigestUnavailableError

# 32 random bytes encode to 43 base64url characters, the PKCE minimum
VERIFIER_BYTES = 32


def generate_code_verifier() -> str:
    """Generate a PKCE code verifier.

    Returns:
        Base64url string (no padding) of 32 bytes from the OS CSPRNG
    """
    verifier_bytes = secrets.token_bytes(VERIFIER_BYTES)
    return urlsafe_b64encode(verifier_bytes).rstrip(b"=").decode("ascii")


def generate_code_challenge(verifier: str) -> str:
    """Derive the S256 code challenge for a verifier.

    Args:
        verifier: Code verifier (ASCII)

    Returns:
        Base64url string (no padding) of SHA-256(verifier)

    Raises:
        DigestUnavailableError: If the runtime has no SHA-256 implementation
    """
    data = verifier.encode("ascii")
    try:
        digest = hashlib.new("sha256", data).digest()
    except ValueError as e:
        raise DigestUnavailableError("SHA-256 digest is not available") from e

    return urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def generate_pkce_pair() -> tuple[str, str]:
    """Generate PKCE verifier and challenge for OAuth authorization.

    The challenge is sent in the authorization request and the verifier in
    the token exchange, binding the authorization code to this client.

    Returns:
        Tuple of (verifier, challenge), both base64url encoded strings

    Example:
        >>> verifier, challenge = generate_pkce_pair()
        >>> # Send challenge in authorization request
        >>> # Send verifier in token exchange request
    """
    verifier = generate_code_verifier()
    return (verifier, generate_code_challenge(verifier))
