"""Dependency injection module."""

from typing import Type

from memora.util.di.application import ProdApplicationProvider
from memora.util.di.base import Component, ProviderBase
from memora.util.di.core import ProdConfigProvider
from memora.util.di.domain import ProdDomainProvider
from memora.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    ProdTaggingProvider,
    StorageProvider,
    TaggingProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    TaggingProvider,
    StorageProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    A provider without subclasses is concrete and used as-is. A provider with
    subclasses is a mockable component; its implementation is picked by the
    ``__is_mock__`` flag.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "PersistenceProvider",
    "StorageProvider",
    "TaggingProvider",
    # Infrastructure implementations
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "ProdTaggingProvider",
]
