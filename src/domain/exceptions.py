"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class ProductNotFoundError(DomainError):
    """Raised when a selector resolves to no product."""


class ProductValidationError(DomainError):
    """Raised when product input is malformed."""
