"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .tagging import MockTaggingProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockStorageProvider",
    "MockTaggingProvider",
    "build_test_container",
]
