"""Domain services - Stateless operations on domain objects."""

from .expiration_calculator import MILLISECONDS_PER_DAY, ExpirationCalculator

__all__ = ["MILLISECONDS_PER_DAY", "ExpirationCalculator"]
