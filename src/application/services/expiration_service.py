"""Application service resolving products and refreshing their expiration data."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from ...domain.entities import Product
from ...domain.services import ExpirationCalculator
from ...domain.value_objects import (
    ExpirationStatus,
    ExpirationThresholds,
    ProductSelector,
    SelectorKind,
)
from ..ports import ProductStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class LookupResult:
    """A refreshed product together with its status band and message."""

    product: Product
    status: ExpirationStatus
    message: str

    @property
    def days_remaining(self) -> int:
        # Always set by lookup_and_refresh.
        return self.product.days_expiration  # type: ignore[return-value]


class ExpirationService:
    """
    Computes days-to-expiration and writes it back on lookup.

    The resolve and the save are two separate store calls with no
    transaction around them. Concurrent refreshes of one record may
    interleave and the last write wins; a record deleted in between
    surfaces as ProductNotFoundError from the save.
    """

    def __init__(
        self,
        store: ProductStore,
        thresholds: ExpirationThresholds | None = None,
        *,
        clock: Clock = utc_now,
    ) -> None:
        """
        Initialize the service.

        Args:
            store: Connected product store handle.
            thresholds: Status band boundaries.
            clock: Source of the current instant.
        """
        self._store = store
        self._calculator = ExpirationCalculator(thresholds)
        self._clock = clock

    def compute_days_remaining(self, now: datetime, expiration_date: datetime) -> int:
        return self._calculator.compute_days_remaining(now, expiration_date)

    def classify(self, days: int) -> ExpirationStatus:
        return self._calculator.classify(days)

    def describe(self, days: int) -> str:
        return self._calculator.describe(days)

    async def resolve(self, selector: ProductSelector) -> Product:
        """Resolve a selector through the store without refreshing."""
        match selector.kind:
            case SelectorKind.ID:
                return await self._store.find_by_id(selector.value)
            case SelectorKind.NAME:
                return await self._store.find_by_name_substring(selector.value)

    async def lookup_and_refresh(self, selector: ProductSelector) -> LookupResult:
        """
        Resolve a product, recompute its days remaining and persist the value.

        Args:
            selector: Exact id or name fragment.

        Returns:
            LookupResult with the refreshed product.

        Raises:
            ProductNotFoundError: If resolution or the save finds no record.
            StoreUnavailableError: If the store fails.
        """
        product = await self.resolve(selector)

        now = self._clock()
        days = self.compute_days_remaining(now, product.date_expiration)
        product.record_days_remaining(days, at=now)
        saved = await self._store.save(product)

        status = self.classify(days)
        logger.info("Refreshed product %s (%s): %d days, %s", saved.id, selector, days, status)
        return LookupResult(product=saved, status=status, message=self.describe(days))
