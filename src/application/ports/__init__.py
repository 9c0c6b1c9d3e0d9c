"""Application ports - Interfaces for external adapters."""

from .product_store import ProductStore

__all__ = [
    "ProductStore",
]
