"""Expiration status value object."""

from enum import StrEnum, auto


class ExpirationStatus(StrEnum):
    """Status band of a product based on days remaining."""

    EXPIRED = auto()
    DANGER = auto()
    WARNING = auto()
    SAFE = auto()

    def __str__(self) -> str:
        return self.value
