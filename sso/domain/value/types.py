"""Domain value objects for the gov.br login flow.

Value objects are immutable and defined by their values, not identity.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ValueObject(BaseModel):
    """Immutable, compared by value."""

    model_config = ConfigDict(frozen=True)


class SecurityContext(ValueObject):
    """Anti-forgery material for one in-flight login attempt.

    Created when the login URL is built, stored in the user's session and
    consumed exactly once by the callback.

    Attributes:
        state: CSRF correlation value round-tripped through gov.br
        nonce: Replay defense value echoed in the id_token
        code_verifier: PKCE secret sent only in the token exchange
    """

    state: str = Field(min_length=1)
    nonce: str = Field(min_length=1)
    code_verifier: str = Field(min_length=43, max_length=128)


class CallbackParams(ValueObject):
    """Query parameters gov.br sends to the redirect URI."""

    code: str | None = None
    state: str | None = None
    error: str | None = None
    error_description: str | None = None


class TokenResponse(ValueObject):
    """Token endpoint response.

    Only ``access_token`` is required. Extra fields are ignored.
    """

    access_token: str = Field(min_length=1)
    token_type: str | None = None
    expires_in: int | None = None
    scope: str | None = None
    id_token: str | None = None


class RedirectOutcome(ValueObject):
    """Callback succeeded; send the browser to ``url``."""

    kind: Literal["redirect"] = "redirect"
    url: str


class ProviderErrorOutcome(ValueObject):
    """gov.br reported an error on the callback (e.g. consent declined).

    The fields are the provider's own user-facing text, passed through as-is.
    """

    kind: Literal["error"] = "error"
    error: str
    error_description: str | None = None
    state: str | None = None


CallbackOutcome = Annotated[
    Union[RedirectOutcome, ProviderErrorOutcome], Field(discriminator="kind")
]
