"""Mock providers for testing."""

from .govbr import MockGovBrProvider
from .container import build_test_container

__all__ = [
    "MockGovBrProvider",
    "build_test_container",
]
