"""Azure Cosmos DB product store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from azure.core.exceptions import AzureError
from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from ....application.exceptions import StoreUnavailableError
from ....domain.entities import Product, parse_expiration_date
from ....domain.exceptions import ProductNotFoundError

logger = logging.getLogger(__name__)

LIST_QUERY = "SELECT * FROM c"
NAME_QUERY = "SELECT TOP 1 * FROM c WHERE CONTAINS(c.name, @fragment, true)"


@dataclass(frozen=True, slots=True)
class CosmosStoreConfig:
    """Configuration for the Cosmos DB product store."""

    endpoint: str = ""
    key: str = ""
    database_name: str = "Products"
    container_name: str = "products"
    partition_key_path: str = "/id"


def product_to_document(product: Product) -> dict[str, Any]:
    """Map a Product to the stored document shape."""
    return {
        "id": product.id,
        "name": product.name,
        "price": float(product.price),
        "dateExpiration": product.date_expiration.isoformat(),
        "daysExpiration": product.days_expiration,
        "createdAt": product.created_at.isoformat(),
        "updatedAt": product.updated_at.isoformat(),
    }


def document_to_product(doc: dict[str, Any]) -> Product:
    """Map a stored document back to a Product."""
    return Product(
        id=doc["id"],
        name=doc["name"],
        price=Decimal(str(doc["price"])),
        date_expiration=parse_expiration_date(doc["dateExpiration"]),
        days_expiration=doc.get("daysExpiration"),
        created_at=parse_expiration_date(doc["createdAt"]),
        updated_at=parse_expiration_date(doc.get("updatedAt") or doc["createdAt"]),
    )


class CosmosProductStore:
    """
    Product store using the Cosmos DB NoSQL API.

    Implements the ProductStore port. Documents are partitioned by id.
    SDK failures other than not-found are raised as StoreUnavailableError.
    """

    def __init__(self, config: CosmosStoreConfig) -> None:
        self._config = config
        self._client: CosmosClient | None = None
        self._container: Any = None

    async def connect(self) -> None:
        """Open the client and ensure the database and container exist."""
        try:
            self._client = CosmosClient(url=self._config.endpoint, credential=self._config.key)
            database = await self._client.create_database_if_not_exists(id=self._config.database_name)
            self._container = await database.create_container_if_not_exists(
                id=self._config.container_name,
                partition_key=PartitionKey(path=self._config.partition_key_path),
            )
        except AzureError as e:
            await self.close()
            msg = f"Failed to connect to Cosmos DB: {e}"
            logger.exception(msg)
            raise StoreUnavailableError(msg) from e

        logger.info(
            "Connected to Cosmos DB %s/%s",
            self._config.database_name,
            self._config.container_name,
        )

    async def close(self) -> None:
        """Close the Cosmos DB client."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._container = None

    def _require_container(self) -> Any:
        if self._container is None:
            raise StoreUnavailableError("Cosmos DB store not connected. Call connect() first.")
        return self._container

    async def _query(self, query: str, parameters: list[dict[str, Any]] | None = None) -> list[dict[str, Any]]:
        container = self._require_container()
        try:
            return [dict(item) async for item in container.query_items(query=query, parameters=parameters)]
        except AzureError as e:
            msg = f"Cosmos DB query failed: {e}"
            raise StoreUnavailableError(msg) from e

    async def list_all(self) -> list[Product]:
        return [document_to_product(doc) for doc in await self._query(LIST_QUERY)]

    async def find_by_id(self, product_id: str) -> Product:
        container = self._require_container()
        try:
            doc = await container.read_item(item=product_id, partition_key=product_id)
        except CosmosResourceNotFoundError as e:
            msg = f"Product {product_id!r} not found"
            raise ProductNotFoundError(msg) from e
        except AzureError as e:
            msg = f"Cosmos DB read failed: {e}"
            raise StoreUnavailableError(msg) from e
        return document_to_product(dict(doc))

    async def find_by_name_substring(self, fragment: str) -> Product:
        docs = await self._query(NAME_QUERY, [{"name": "@fragment", "value": fragment}])
        if not docs:
            msg = f"No product name contains {fragment!r}"
            raise ProductNotFoundError(msg)
        return document_to_product(docs[0])

    async def insert(self, product: Product) -> Product:
        container = self._require_container()
        try:
            doc = await container.create_item(body=product_to_document(product))
        except AzureError as e:
            msg = f"Cosmos DB insert failed: {e}"
            raise StoreUnavailableError(msg) from e
        return document_to_product(dict(doc))

    async def save(self, product: Product) -> Product:
        container = self._require_container()
        try:
            doc = await container.replace_item(item=product.id, body=product_to_document(product))
        except CosmosResourceNotFoundError as e:
            msg = f"Product {product.id!r} no longer exists"
            raise ProductNotFoundError(msg) from e
        except AzureError as e:
            msg = f"Cosmos DB replace failed: {e}"
            raise StoreUnavailableError(msg) from e
        return document_to_product(dict(doc))
