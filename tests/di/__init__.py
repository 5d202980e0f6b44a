"""Mock providers for testing."""

from .clock import FixedClockProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FixedClockProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
