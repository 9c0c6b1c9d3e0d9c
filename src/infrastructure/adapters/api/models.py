"""API request and response models."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ....application.services import LookupResult
from ....domain.entities import Product


class ProductResponse(BaseModel):
    """A stored product as exposed over HTTP."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    price: float
    date_expiration: datetime = Field(alias="dateExpiration")
    days_expiration: int | None = Field(
        default=None,
        alias="daysExpiration",
        description="Days remaining as of the last lookup; not a live value",
    )
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            price=float(product.price),
            date_expiration=product.date_expiration,
            days_expiration=product.days_expiration,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class LookupResponse(BaseModel):
    """A refreshed product with its status band."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    price: float
    date_expiration: datetime = Field(alias="dateExpiration")
    days_expiration: int = Field(alias="daysExpiration")
    status: str = Field(description="expired, danger, warning or safe")
    status_message: str = Field(alias="statusMessage")

    @classmethod
    def from_result(cls, result: LookupResult) -> "LookupResponse":
        product = result.product
        return cls(
            id=product.id,
            name=product.name,
            price=float(product.price),
            date_expiration=product.date_expiration,
            days_expiration=result.days_remaining,
            status=result.status.value,
            status_message=result.message,
        )


class CreateProductRequest(BaseModel):
    """Product creation payload; values are validated by the domain."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    price: Decimal | str | None = None
    date_expiration: str | None = Field(default=None, alias="dateExpiration")


class ProductListEnvelope(BaseModel):
    success: Literal[True] = True
    count: int
    data: list[ProductResponse]


class ProductEnvelope(BaseModel):
    success: Literal[True] = True
    message: str | None = None
    data: ProductResponse


class LookupEnvelope(BaseModel):
    success: Literal[True] = True
    data: LookupResponse


class ErrorEnvelope(BaseModel):
    """Error response."""

    success: Literal[False] = False
    message: str
    error: str | None = None

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime
