"""Citizen identity returned by gov.br."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GovBrUser(BaseModel):
    """Normalized userinfo claims for an authenticated citizen.

    Serializes with the provider's claim names (``sub``, ``profile``,
    ``picture``, ``email_verified``, ``phone_number``,
    ``phone_number_verified``) when dumped with ``by_alias=True``.
    """

    # Field names or claim names both populate the model
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # CPF of the citizen; stable across logins
    subject: str = Field(alias="sub", min_length=1)
    name: str | None = None
    profile_url: str | None = Field(default=None, alias="profile")
    # Protected resource, fetching it requires the access token
    picture_url: str | None = Field(default=None, alias="picture")
    email: str | None = None
    email_verified: bool = False
    phone_number: str | None = None
    phone_number_verified: bool = False

    @field_validator("email_verified", "phone_number_verified", mode="before")
    @classmethod
    def null_is_unverified(cls, v: object) -> object:
        """gov.br sends null for claims the citizen never verified."""
        return False if v is None else v
