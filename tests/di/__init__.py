"""Mock providers for testing."""

from .host import MockHostProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockHostProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
