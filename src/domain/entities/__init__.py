"""Domain entities - Objects with identity and lifecycle."""

from .product import Product, parse_expiration_date, parse_price

__all__ = [
    "Product",
    "parse_expiration_date",
    "parse_price",
]
