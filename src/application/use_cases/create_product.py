"""Use case for creating a product."""

import logging
from datetime import date, datetime
from decimal import Decimal

from ...domain.entities import Product
from ..ports import ProductStore

logger = logging.getLogger(__name__)


class CreateProduct:
    """
    Validate raw input and persist a new product.

    New products start with ``days_expiration`` unset; it is filled in
    by the first lookup.
    """

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    async def execute(
        self,
        *,
        name: str | None,
        price: Decimal | float | int | str | None,
        date_expiration: datetime | date | str | None,
    ) -> Product:
        """
        Create and store a product.

        Raises:
            ProductValidationError: If the input is malformed.
            StoreUnavailableError: If the store fails.
        """
        product = Product.create(name=name, price=price, date_expiration=date_expiration)
        stored = await self._store.insert(product)
        logger.info("Created product %s (%s)", stored.id, stored.name)
        return stored
