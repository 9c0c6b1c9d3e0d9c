"""Use case for listing every product."""

import logging

from ...domain.entities import Product
from ..ports import ProductStore

logger = logging.getLogger(__name__)


class ListProducts:
    """Return all stored products without refreshing them."""

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    async def execute(self) -> list[Product]:
        products = await self._store.list_all()
        logger.info("Retrieved %d products", len(products))
        return products
