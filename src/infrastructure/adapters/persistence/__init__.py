"""Product store adapter implementations."""

from .cosmos import CosmosProductStore, CosmosStoreConfig
from .memory import InMemoryProductStore

__all__ = [
    "CosmosProductStore",
    "CosmosStoreConfig",
    "InMemoryProductStore",
]
