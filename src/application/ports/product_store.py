"""Port for product persistence - driven/secondary port."""

from typing import Protocol

from ...domain.entities import Product


class ProductStore(Protocol):
    """
    Port for storing and resolving products.

    This is a driven (secondary) port. Implementations own an explicit
    connection lifecycle: ``connect`` before use, ``close`` when done.
    Backend failures are raised as StoreUnavailableError and never retried.
    """

    async def connect(self) -> None:
        """Open the underlying connection."""
        ...

    async def close(self) -> None:
        """Release the underlying connection."""
        ...

    async def list_all(self) -> list[Product]:
        """
        Retrieve every stored product, in insertion order where supported.

        Raises:
            StoreUnavailableError: If the backend fails.
        """
        ...

    async def find_by_id(self, product_id: str) -> Product:
        """
        Retrieve a product by its exact identifier.

        Raises:
            ProductNotFoundError: If no product has this identifier.
            StoreUnavailableError: If the backend fails.
        """
        ...

    async def find_by_name_substring(self, fragment: str) -> Product:
        """
        Retrieve the first product whose name contains ``fragment``, ignoring case.

        Which product is returned when several match is unspecified.

        Raises:
            ProductNotFoundError: If no name matches.
            StoreUnavailableError: If the backend fails.
        """
        ...

    async def insert(self, product: Product) -> Product:
        """
        Persist a new product.

        Raises:
            StoreUnavailableError: If the backend fails.
        """
        ...

    async def save(self, product: Product) -> Product:
        """
        Persist changes to an existing product.

        Raises:
            ProductNotFoundError: If the record no longer exists.
            StoreUnavailableError: If the backend fails.
        """
        ...
