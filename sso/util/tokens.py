"""Opaque random tokens for the OAuth state and nonce parameters."""

import secrets

TOKEN_BYTES = 32


def generate_state() -> str:
    """Generate an unguessable CSRF state value."""
    return secrets.token_urlsafe(TOKEN_BYTES)


def generate_nonce() -> str:
    """Generate an unguessable replay-protection nonce."""
    return secrets.token_urlsafe(TOKEN_BYTES)


def tokens_match(expected: str | None, received: object) -> bool:
    """Constant-time comparison. A missing or non-string value never matches."""
    if not expected or not isinstance(received, str) or not received:
        return False
    return secrets.compare_digest(expected.encode("utf-8"), received.encode("utf-8"))
