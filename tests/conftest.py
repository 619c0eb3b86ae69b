"""Test configuration and fixtures."""

import os

import pytest

# Settings are read from the environment; pin a provider and client
# registration before any test module builds them
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("GOVBR__URL_PROVIDER", "https://idp.test")
os.environ.setdefault("GOVBR__URL_SERVICE", "https://app.test")
os.environ.setdefault("GOVBR__CLIENT_ID", "abc")
os.environ.setdefault("GOVBR__CLIENT_SECRET", "s3cret")
os.environ.setdefault("GOVBR__REDIRECT_URI", "https://app.test/openid")
os.environ.setdefault("GOVBR__SCOPES", "openid profile")
os.environ.setdefault("GOVBR__LOGOUT_URI", "https://app.test/bye")
os.environ.setdefault("SESSION__SECRET_KEY", "test-session-secret")

from sso.config import GovBrSettings  # noqa: E402


@pytest.fixture
def govbr_settings() -> GovBrSettings:
    """Provider settings used by the documented login scenarios."""
    return GovBrSettings(
        url_provider="https://idp.test",
        client_id="abc",
        client_secret="s3cret",
        redirect_uri="https://app.test/openid",
        scopes="openid profile",
        logout_uri="https://app.test/bye",
    )
