"""Product selector value object."""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Self

from ..exceptions import ProductValidationError


class SelectorKind(StrEnum):
    """How a selector resolves a product."""

    ID = auto()
    NAME = auto()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ProductSelector:
    """An exact identifier or a case-insensitive name fragment."""

    kind: SelectorKind
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            msg = f"Selector {self.kind} must not be empty"
            raise ProductValidationError(msg)

    @classmethod
    def by_id(cls, product_id: str) -> Self:
        return cls(kind=SelectorKind.ID, value=product_id)

    @classmethod
    def by_name(cls, fragment: str) -> Self:
        return cls(kind=SelectorKind.NAME, value=fragment)

    def __str__(self) -> str:
        return f"{self.kind}={self.value!r}"
