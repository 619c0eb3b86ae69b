"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class NotAuthenticatedError(InterfaceError):
    """No citizen is logged into the session."""

    pass
