"""Infrastructure providers."""

# Import bases
from .govbr import GovBrProvider

# Import implementations (needed for __subclasses__())
from .govbr import ProdGovBrProvider  # noqa: F401

__all__ = [
    "GovBrProvider",
    "ProdGovBrProvider",
]
