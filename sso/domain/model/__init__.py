"""Domain model entities."""

from sso.domain.model.govbr_user import GovBrUser

__all__ = ["GovBrUser"]
