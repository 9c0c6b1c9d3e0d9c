"""API adapter for HTTP endpoints."""

from .app import create_app
from .models import (
    CreateProductRequest,
    ErrorEnvelope,
    HealthResponse,
    LookupResponse,
    ProductResponse,
)

__all__ = [
    "CreateProductRequest",
    "ErrorEnvelope",
    "HealthResponse",
    "LookupResponse",
    "ProductResponse",
    "create_app",
]
