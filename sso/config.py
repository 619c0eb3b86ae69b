"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GovBrSettings(BaseModel):
    """gov.br identity provider configuration."""

    # Base URL for /authorize, /token, /userinfo and /logout
    url_provider: str = "https://sso.staging.acesso.gov.br"

    # This application's own base URL
    url_service: str = "http://localhost:8080"

    # Callback registered with gov.br (must match exactly)
    redirect_uri: str = "http://localhost:8080/openid"

    # Space-delimited
    scopes: str = "openid email profile"

    client_id: str = "CHANGE_ME_IN_PRODUCTION"
    client_secret: str = "CHANGE_ME_IN_PRODUCTION"

    # Where gov.br sends the browser after end-session
    logout_uri: str = "http://localhost:8080/logout/govbr"

    # Seconds, applied to both the token and userinfo calls
    http_timeout: float = 10.0

    # Compare the id_token nonce claim with the stored nonce when present
    verify_nonce: bool = True

    @field_validator("url_provider")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are appended to the provider URL."""
        return v.rstrip("/")

    @computed_field
    @property
    def authorize_url(self) -> str:
        return f"{self.url_provider}/authorize"

    @computed_field
    @property
    def token_url(self) -> str:
        return f"{self.url_provider}/token"

    @computed_field
    @property
    def userinfo_url(self) -> str:
        return f"{self.url_provider}/userinfo"

    @computed_field
    @property
    def end_session_url(self) -> str:
        return f"{self.url_provider}/logout"


class SessionSettings(BaseModel):
    """Host session configuration (server-side data, signed id cookie)."""

    secret_key: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    cookie_name: str = "govbr_session"
    max_age: int = 8 * 60 * 60
    same_site: Literal["lax", "strict", "none"] = "lax"
    https_only: bool = False


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Values come from the environment or a .env file, nested with ``__``:

        GOVBR__URL_PROVIDER=https://sso.acesso.gov.br
        GOVBR__CLIENT_ID=...
        GOVBR__CLIENT_SECRET=...
        GOVBR__REDIRECT_URI=https://app.example.gov.br/openid
        GOVBR__LOGOUT_URI=https://app.example.gov.br/logout/govbr
        SESSION__SECRET_KEY=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows GOVBR__CLIENT_ID syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    govbr: GovBrSettings = GovBrSettings()
    session: SessionSettings = SessionSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
