"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ...application.exceptions import ConfigurationError
from ...domain.value_objects import ExpirationThresholds
from ..adapters.persistence import CosmosStoreConfig

STORE_BACKENDS = ("memory", "cosmos")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    raw = os.environ.get(key, str(default))
    try:
        return int(raw)
    except ValueError as e:
        msg = f"{key} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from e


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _env_list(key: str, default: str = "") -> list[str]:
    """Get comma-separated list from environment variable."""
    return [item.strip() for item in os.environ.get(key, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings container."""

    # Persistence
    store_backend: str = field(default_factory=lambda: _env_str("STORE_BACKEND", "memory"))
    cosmos_endpoint: str = field(default_factory=lambda: _env_str("COSMOS_ENDPOINT"))
    cosmos_key: str = field(default_factory=lambda: _env_str("COSMOS_KEY"))
    cosmos_database: str = field(default_factory=lambda: _env_str("COSMOS_DATABASE", "Products"))
    cosmos_container: str = field(default_factory=lambda: _env_str("COSMOS_CONTAINER", "products"))

    # Status bands
    danger_threshold_days: int = field(default_factory=lambda: _env_int("DANGER_THRESHOLD_DAYS", 7))
    warning_threshold_days: int = field(default_factory=lambda: _env_int("WARNING_THRESHOLD_DAYS", 30))

    # API settings
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", 3000))
    cors_origins: list[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    def validate(self) -> None:
        """Validate settings."""
        backend = self.store_backend.lower()
        if backend not in STORE_BACKENDS:
            msg = f"Invalid STORE_BACKEND: {self.store_backend} (use {' or '.join(STORE_BACKENDS)})"
            raise ConfigurationError(msg)

        if backend == "cosmos":
            missing: list[str] = []
            if not self.cosmos_endpoint:
                missing.append("COSMOS_ENDPOINT")
            if not self.cosmos_key:
                missing.append("COSMOS_KEY")
            if missing:
                msg = f"Missing required environment variables: {', '.join(missing)}"
                raise ConfigurationError(msg)

        # Raises ValueError on misordered bands
        _ = self.thresholds

    @cached_property
    def thresholds(self) -> ExpirationThresholds:
        """Get status band thresholds."""
        return ExpirationThresholds(
            danger=self.danger_threshold_days,
            warning=self.warning_threshold_days,
        )

    @cached_property
    def cosmos_config(self) -> CosmosStoreConfig:
        """Get Cosmos DB store configuration."""
        return CosmosStoreConfig(
            endpoint=self.cosmos_endpoint,
            key=self.cosmos_key,
            database_name=self.cosmos_database,
            container_name=self.cosmos_container,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
