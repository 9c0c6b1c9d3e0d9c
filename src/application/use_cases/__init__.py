"""Application use cases."""

from .create_product import CreateProduct
from .list_products import ListProducts

__all__ = [
    "CreateProduct",
    "ListProducts",
]
