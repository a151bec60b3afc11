"""Mock providers for testing."""

from .invalidation import MockInvalidationProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockInvalidationProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
