"""Product entity representing an inventory record."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Self
from uuid import uuid4

from ..exceptions import ProductValidationError


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def parse_expiration_date(value: datetime | date | str) -> datetime:
    """
    Parse an expiration date into a timezone-aware datetime.

    Naive values are assumed to be UTC; plain dates map to midnight UTC.

    Raises:
        ProductValidationError: If the value is not a parseable date.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=UTC)
    if isinstance(value, str) and value.strip():
        try:
            return _as_utc(datetime.fromisoformat(value.strip().replace("Z", "+00:00")))
        except ValueError as e:
            msg = f"Invalid expiration date: {value!r}"
            raise ProductValidationError(msg) from e
    msg = f"Invalid expiration date: {value!r}"
    raise ProductValidationError(msg)


def parse_price(value: Decimal | float | int | str) -> Decimal:
    """Parse a non-negative price."""
    if isinstance(value, bool):
        msg = f"Invalid price: {value!r}"
        raise ProductValidationError(msg)
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        msg = f"Invalid price: {value!r}"
        raise ProductValidationError(msg) from e
    if not price.is_finite():
        msg = f"Invalid price: {value!r}"
        raise ProductValidationError(msg)
    if price < 0:
        msg = f"Price must not be negative: {price}"
        raise ProductValidationError(msg)
    return price


@dataclass(slots=True)
class Product:
    """A product with an expiration date.

    ``days_expiration`` is a cached value written by the last lookup that
    touched this record. It is stale as soon as the calendar moves on and is
    never authoritative; recompute it from ``date_expiration`` when needed.
    """

    id: str
    name: str
    price: Decimal
    date_expiration: datetime
    days_expiration: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def record_days_remaining(self, days: int, *, at: datetime) -> None:
        """Overwrite the cached days-remaining value."""
        self.days_expiration = days
        self.updated_at = at

    @classmethod
    def create(
        cls,
        *,
        name: str | None,
        price: Decimal | float | int | str | None,
        date_expiration: datetime | date | str | None,
        product_id: str | None = None,
    ) -> Self:
        """
        Factory method to create a new Product from raw input.

        Args:
            name: Product name, trimmed; must not be empty.
            price: Non-negative number or numeric string.
            date_expiration: datetime, date or ISO-8601 string.
            product_id: Identifier to assign; a new one is generated if omitted.

        Returns:
            A Product with ``days_expiration`` unset.

        Raises:
            ProductValidationError: If any field is missing or malformed.
        """
        if name is None or not str(name).strip():
            raise ProductValidationError("Product name is required")
        if price is None:
            raise ProductValidationError("Product price is required")
        if date_expiration is None:
            raise ProductValidationError("Product expiration date is required")

        now = datetime.now(UTC)
        return cls(
            id=product_id or uuid4().hex,
            name=str(name).strip(),
            price=parse_price(price),
            date_expiration=parse_expiration_date(date_expiration),
            days_expiration=None,
            created_at=now,
            updated_at=now,
        )
