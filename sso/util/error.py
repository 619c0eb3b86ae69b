"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error."""

    pass


class DigestUnavailableError(UtilError):
    """SHA-256 is not available in this runtime."""

    pass
