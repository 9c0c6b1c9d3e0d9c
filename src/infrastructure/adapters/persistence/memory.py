"""In-memory product store."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace

from ....domain.entities import Product
from ....domain.exceptions import ProductNotFoundError

logger = logging.getLogger(__name__)


class InMemoryProductStore:
    """
    Product store backed by an insertion-ordered dict.

    Implements the ProductStore port. Callers always receive copies, so a
    record only changes when it is passed back through ``save``.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: dict[str, Product] = {p.id: replace(p) for p in products or []}
        self._lock = asyncio.Lock()

    async def connect(self) -> None:
        logger.info("Using in-memory product store (%d products)", len(self._products))

    async def close(self) -> None:
        logger.debug("In-memory product store closed")

    async def list_all(self) -> list[Product]:
        return [replace(p) for p in self._products.values()]

    async def find_by_id(self, product_id: str) -> Product:
        product = self._products.get(product_id)
        if product is None:
            msg = f"Product {product_id!r} not found"
            raise ProductNotFoundError(msg)
        return replace(product)

    async def find_by_name_substring(self, fragment: str) -> Product:
        needle = fragment.casefold()
        for product in self._products.values():
            if needle in product.name.casefold():
                return replace(product)
        msg = f"No product name contains {fragment!r}"
        raise ProductNotFoundError(msg)

    async def insert(self, product: Product) -> Product:
        async with self._lock:
            self._products[product.id] = replace(product)
        return replace(product)

    async def save(self, product: Product) -> Product:
        async with self._lock:
            if product.id not in self._products:
                msg = f"Product {product.id!r} no longer exists"
                raise ProductNotFoundError(msg)
            self._products[product.id] = replace(product)
        return replace(product)
