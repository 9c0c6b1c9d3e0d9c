"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class StoreUnavailableError(ApplicationError):
    """Raised when the product store cannot be reached or fails."""


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""
