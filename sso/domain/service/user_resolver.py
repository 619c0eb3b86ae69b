"""Decoding of the identity stored in a session."""

from collections.abc import Mapping

from pydantic import ValidationError

from sso.domain.error import SessionDecodeError
from sso.domain.model import GovBrUser


def decode_user(raw: object) -> GovBrUser:
    """Convert a stored session entry into a GovBrUser.

    Session backends hand back the same logical entry in different shapes:
    the model itself (in-memory), JSON text (string-serializing stores) or a
    mapping (cookie/JSON stores). Every shape goes through the same pydantic
    validation of GovBrUser.

    Args:
        raw: Stored value

    Returns:
        Decoded identity

    Raises:
        SessionDecodeError: If the value is not a valid identity in any shape
    """
    try:
        if isinstance(raw, GovBrUser):
            return raw
        if isinstance(raw, (str, bytes, bytearray)):
            return GovBrUser.model_validate_json(raw)
        if isinstance(raw, Mapping):
            return GovBrUser.model_validate(dict(raw))
    except ValidationError as e:
        raise SessionDecodeError(
            f"Stored identity is invalid: {e.error_count()} validation error(s)"
        ) from e
    except UnicodeDecodeError as e:
        raise SessionDecodeError("Stored identity is not valid UTF-8") from e

    raise SessionDecodeError(f"Unsupported stored identity type: {type(raw).__name__}")
