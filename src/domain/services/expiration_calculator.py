"""Domain service for computing and classifying time to expiration."""

from datetime import datetime, timedelta
from typing import Final

from ..value_objects import ExpirationStatus, ExpirationThresholds

MILLISECONDS_PER_DAY: Final = 86_400_000
_MICROSECONDS_PER_DAY: Final = MILLISECONDS_PER_DAY * 1000
_ONE_MICROSECOND: Final = timedelta(microseconds=1)


class ExpirationCalculator:
    """Stateless days-remaining arithmetic and status banding."""

    def __init__(self, thresholds: ExpirationThresholds | None = None) -> None:
        """Initialize calculator with thresholds."""
        self._thresholds = thresholds or ExpirationThresholds()

    @property
    def thresholds(self) -> ExpirationThresholds:
        return self._thresholds

    @staticmethod
    def compute_days_remaining(now: datetime, expiration_date: datetime) -> int:
        """
        Whole days until expiration, rounded toward positive infinity.

        The difference is taken in exact integer microseconds and
        ceiling-divided by the length of a day, so 30.1 hours ahead
        yields 2, 400 microseconds ahead yields 1 and 1.5 days ago
        yields -1.

        Args:
            now: Current instant.
            expiration_date: Expiration instant.

        Returns:
            Days remaining, negative once past expiration.
        """
        micros = (expiration_date - now) // _ONE_MICROSECOND
        return -(-micros // _MICROSECONDS_PER_DAY)

    def classify(self, days: int) -> ExpirationStatus:
        """Map days remaining to a status band (upper bounds inclusive)."""
        if days < 0:
            return ExpirationStatus.EXPIRED
        if days <= self._thresholds.danger:
            return ExpirationStatus.DANGER
        if days <= self._thresholds.warning:
            return ExpirationStatus.WARNING
        return ExpirationStatus.SAFE

    @staticmethod
    def describe(days: int) -> str:
        """Human-readable message for days remaining."""
        if days < 0:
            return f"expired {abs(days)} days ago"
        if days == 0:
            return "expires today"
        if days == 1:
            return "expires tomorrow"
        return f"{days} days remaining"
