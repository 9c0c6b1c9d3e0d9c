"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from src.domain.entities import Product
from src.domain.value_objects import ExpirationThresholds
from src.infrastructure.adapters.persistence import InMemoryProductStore

FIXED_NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """A fixed current instant."""
    return FIXED_NOW


@pytest.fixture
def clock(now: datetime):
    """Clock returning the fixed instant."""
    return lambda: now


@pytest.fixture
def default_thresholds() -> ExpirationThresholds:
    """Default status band thresholds."""
    return ExpirationThresholds(danger=7, warning=30)


@pytest.fixture
def milk(now: datetime) -> Product:
    """A product expiring in exactly five days."""
    return Product(
        id="milk-1",
        name="Milk",
        price=Decimal("2.50"),
        date_expiration=now + timedelta(days=5),
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def bread(now: datetime) -> Product:
    """A product that expired two days ago."""
    return Product(
        id="bread-1",
        name="Whole Wheat Bread",
        price=Decimal("3.10"),
        date_expiration=now - timedelta(days=2),
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def store(milk: Product, bread: Product) -> InMemoryProductStore:
    """In-memory store seeded with milk and bread."""
    return InMemoryProductStore([milk, bread])
