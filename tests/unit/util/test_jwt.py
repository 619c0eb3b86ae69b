"""Unit tests for id_token claim reading."""

import jwt
import pytest

from sso.util.jwt import JWTError, read_id_token_claims


class TestReadIdTokenClaims:
    """Tests for read_id_token_claims function."""

    def test_reads_claims_without_key(self):
        """Should return claims of a token signed with an unknown key."""
        token = jwt.encode(
            {"sub": "12345678900", "nonce": "n-1"}, "provider-signing-key-not-known-to-the-client", algorithm="HS256"
        )

        claims = read_id_token_claims(token)

        assert claims["sub"] == "12345678900"
        assert claims["nonce"] == "n-1"

    def test_garbage_raises(self):
        """Should raise JWTError for a value that is not a JWT."""
        with pytest.raises(JWTError):
            read_id_token_claims("not-a-jwt")
