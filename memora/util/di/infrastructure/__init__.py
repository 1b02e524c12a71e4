"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .storage import StorageProvider
from .tagging import TaggingProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401
from .tagging import ProdTaggingProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "ProdTaggingProvider",
    "StorageProvider",
    "TaggingProvider",
]
