"""Infrastructure DI providers."""

from hub.util.di.infrastructure.persistence import (
    InMemoryPersistenceProvider,
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "InMemoryPersistenceProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
