"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ....application.exceptions import StoreUnavailableError
from ....application.services import ExpirationService
from ....application.services.expiration_service import utc_now
from ....application.use_cases import CreateProduct, ListProducts
from ....domain.exceptions import ProductNotFoundError, ProductValidationError
from ....domain.value_objects import ProductSelector
from .models import (
    CreateProductRequest,
    ErrorEnvelope,
    HealthResponse,
    LookupEnvelope,
    LookupResponse,
    ProductEnvelope,
    ProductListEnvelope,
    ProductResponse,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Sequence

    from ....application.ports import ProductStore
    from ....application.services.expiration_service import Clock
    from ....domain.value_objects import ExpirationThresholds

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Product not found"


def _error(status_code: int, message: str, error: Exception | None = None) -> JSONResponse:
    envelope = ErrorEnvelope(message=message, error=str(error) if error else None)
    return JSONResponse(status_code=status_code, content=envelope.to_content())


class ApiState:
    """Shared state for API endpoints."""

    def __init__(
        self,
        store: ProductStore,
        thresholds: ExpirationThresholds | None,
        clock: Clock,
        version: str,
    ) -> None:
        """Initialize API state."""
        self.store = store
        self.version = version
        self.expiration = ExpirationService(store, thresholds, clock=clock)
        self.list_products = ListProducts(store)
        self.create_product = CreateProduct(store)


def create_app(
    store: ProductStore,
    thresholds: ExpirationThresholds | None = None,
    *,
    version: str = "1.0.0",
    cors_origins: Sequence[str] = ("*",),
    clock: Clock = utc_now,
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        store: Product store; opened on startup and closed on shutdown.
        thresholds: Status band boundaries.
        version: Application version string.
        cors_origins: Origins allowed by the CORS middleware.
        clock: Source of the current instant for lookups.

    Returns:
        Configured FastAPI application.
    """
    state = ApiState(store=store, thresholds=thresholds, clock=clock, version=version)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        await state.store.connect()
        try:
            yield
        finally:
            await state.store.close()
            logger.info("API server shutting down...")

    app = FastAPI(
        title="Inventory Expiration API",
        description="Store products and track how many days remain until they expire. "
        "Looking a product up refreshes its cached `daysExpiration` value.",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorEnvelope, "description": "Internal server error"},
        },
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=state.version,
            timestamp=datetime.now(UTC),
        )

    @app.get(
        "/api/products",
        response_model=ProductListEnvelope,
        tags=["Products"],
        summary="List products",
        description="Return every stored product. Cached days values are not refreshed.",
    )
    async def get_all_products() -> ProductListEnvelope | JSONResponse:
        try:
            products = await state.list_products.execute()
        except StoreUnavailableError as e:
            logger.error("Listing products failed: %s", e)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error getting products", e)

        return ProductListEnvelope(
            count=len(products),
            data=[ProductResponse.from_product(p) for p in products],
        )

    async def _lookup(selector_factory, value: str) -> LookupEnvelope | JSONResponse:
        try:
            result = await state.expiration.lookup_and_refresh(selector_factory(value))
        except ProductNotFoundError as e:
            logger.info("Lookup missed: %s", e)
            return _error(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
        except (ProductValidationError, StoreUnavailableError) as e:
            logger.error("Lookup failed: %s", e)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error finding product", e)

        return LookupEnvelope(data=LookupResponse.from_result(result))

    @app.get(
        "/api/products/search/{name}",
        response_model=LookupEnvelope,
        tags=["Products"],
        summary="Find product by name",
        description="Case-insensitive substring match on the name. Refreshes days remaining.",
        responses={404: {"model": ErrorEnvelope, "description": "Product not found"}},
    )
    async def find_product(name: str) -> LookupEnvelope | JSONResponse:
        return await _lookup(ProductSelector.by_name, name)

    @app.get(
        "/api/products/{product_id}",
        response_model=LookupEnvelope,
        tags=["Products"],
        summary="Find product by id",
        description="Exact id lookup. Refreshes days remaining.",
        responses={404: {"model": ErrorEnvelope, "description": "Product not found"}},
    )
    async def find_product_by_id(product_id: str) -> LookupEnvelope | JSONResponse:
        return await _lookup(ProductSelector.by_id, product_id)

    @app.post(
        "/api/products",
        response_model=ProductEnvelope,
        status_code=status.HTTP_201_CREATED,
        tags=["Products"],
        summary="Create product",
    )
    async def create_product(payload: CreateProductRequest) -> ProductEnvelope | JSONResponse:
        try:
            product = await state.create_product.execute(
                name=payload.name,
                price=payload.price,
                date_expiration=payload.date_expiration,
            )
        except (ProductValidationError, StoreUnavailableError) as e:
            logger.error("Creating product failed: %s", e)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error creating product", e)

        return ProductEnvelope(
            message="Product created successfully",
            data=ProductResponse.from_product(product),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report malformed requests in the uniform envelope."""
        logger.warning("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Invalid request", exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", exc)

    return app
