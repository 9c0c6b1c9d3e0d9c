"""Infrastructure adapters - Implementations of application ports."""

from .persistence import CosmosProductStore, InMemoryProductStore

__all__ = [
    "CosmosProductStore",
    "InMemoryProductStore",
]
