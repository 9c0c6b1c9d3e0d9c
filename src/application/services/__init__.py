"""Application services."""

from .expiration_service import ExpirationService, LookupResult

__all__ = [
    "ExpirationService",
    "LookupResult",
]
