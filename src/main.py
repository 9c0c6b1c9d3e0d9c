#!/usr/bin/env python3
"""
Inventory Expiration API

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from .application.exceptions import ConfigurationError
from .infrastructure.adapters import CosmosProductStore, InMemoryProductStore
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from fastapi import FastAPI

    from .application.ports import ProductStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Application version
__version__ = "1.0.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_product_store(self) -> ProductStore:
        """Create the product store adapter for the configured backend."""
        match self._settings.store_backend.lower():
            case "cosmos":
                logger.info("Using Cosmos DB product store")
                return CosmosProductStore(self._settings.cosmos_config)
            case "memory":
                logger.warning("Using in-memory product store; data is lost on restart")
                return InMemoryProductStore()
            case other:
                msg = f"Invalid STORE_BACKEND: {other}"
                raise ConfigurationError(msg)

    def create_app(self) -> FastAPI:
        """Create the HTTP application with all dependencies."""
        from .infrastructure.adapters.api import create_app

        return create_app(
            store=self.create_product_store(),
            thresholds=self._settings.thresholds,
            version=__version__,
            cors_origins=self._settings.cors_origins,
        )


def run_api(settings: Settings) -> None:
    """Run in API server mode."""
    import uvicorn

    app = ApplicationContainer(settings).create_app()

    logger.info("Starting API server on %s:%d", settings.api_host, settings.api_port)
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


def main() -> None:
    """Main entry point."""
    try:
        logger.info("Inventory Expiration API starting...")

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        run_api(settings)

    except (ConfigurationError, ValueError) as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
