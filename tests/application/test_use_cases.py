"""Tests for the product use cases."""

from __future__ import annotations

import pytest

from src.application.use_cases import CreateProduct, ListProducts
from src.domain.exceptions import ProductValidationError
from src.infrastructure.adapters.persistence import InMemoryProductStore


class TestListProducts:
    async def test_lists_in_insertion_order(self, store: InMemoryProductStore) -> None:
        products = await ListProducts(store).execute()
        assert [p.id for p in products] == ["milk-1", "bread-1"]

    async def test_empty_store(self) -> None:
        assert await ListProducts(InMemoryProductStore()).execute() == []


class TestCreateProduct:
    async def test_creates_and_stores(self) -> None:
        """Created products are persisted with no cached days value."""
        store = InMemoryProductStore()

        product = await CreateProduct(store).execute(
            name="Yogurt", price="1.99", date_expiration="2026-04-01"
        )

        assert product.days_expiration is None
        stored = await store.find_by_id(product.id)
        assert stored.name == "Yogurt"
        assert stored.days_expiration is None

    async def test_invalid_input_stores_nothing(self) -> None:
        store = InMemoryProductStore()
        with pytest.raises(ProductValidationError):
            await CreateProduct(store).execute(name="", price=1, date_expiration="2026-04-01")
        assert await store.list_all() == []
