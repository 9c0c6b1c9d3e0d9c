"""Expiration thresholds value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExpirationThresholds:
    """Upper bounds (in days, inclusive) of the danger and warning bands."""

    danger: int = 7
    warning: int = 30

    def __post_init__(self) -> None:
        """Validate thresholds are in correct order."""
        if not (0 <= self.danger < self.warning):
            msg = (
                f"Thresholds must be: 0 <= danger({self.danger}) "
                f"< warning({self.warning})"
            )
            raise ValueError(msg)
