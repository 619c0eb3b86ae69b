"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class SecurityViolationError(DomainError):
    """Raised when a callback fails anti-forgery checks.

    Covers a state that does not match the pending login attempt (or no
    pending attempt at all) and an id_token nonce that does not match.
    Always fatal to the request.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Security violation: {reason}")


class SessionDecodeError(DomainError):
    """Raised when a stored identity cannot be decoded back into a user."""

    pass


class ProviderError(DomainError):
    """gov.br back-channel call failed.

    Raised by GovBrOAuthClient implementations, and by the domain service
    when the provider's response cannot be used. Keeps the raw HTTP status
    and body for diagnostics; neither is ever shown to the end user.
    """

    def __init__(
        self, message: str, status_code: int | None = None, body: str | None = None
    ):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class TokenExchangeError(ProviderError):
    """Authorization code could not be exchanged for an access token."""

    pass


class UserInfoError(ProviderError):
    """Userinfo endpoint failed or returned an undecodable identity."""

    pass
