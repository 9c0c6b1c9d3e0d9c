"""Domain value objects - Immutable objects defined by their attributes."""

from .expiration_status import ExpirationStatus
from .selector import ProductSelector, SelectorKind
from .thresholds import ExpirationThresholds

__all__ = [
    "ExpirationStatus",
    "ExpirationThresholds",
    "ProductSelector",
    "SelectorKind",
]
