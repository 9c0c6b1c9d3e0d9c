"""Tests for ProductSelector value object."""

from __future__ import annotations

import pytest

from src.domain.exceptions import ProductValidationError
from src.domain.value_objects import ProductSelector, SelectorKind


class TestProductSelector:
    """Tests for ProductSelector."""

    def test_by_id(self) -> None:
        selector = ProductSelector.by_id("abc")
        assert selector.kind == SelectorKind.ID
        assert selector.value == "abc"

    def test_by_name(self) -> None:
        selector = ProductSelector.by_name("mil")
        assert selector.kind == SelectorKind.NAME
        assert selector.value == "mil"

    def test_empty_selector_rejected(self) -> None:
        """Selectors must carry a value."""
        with pytest.raises(ProductValidationError):
            ProductSelector.by_name("")

    def test_whitespace_fragment_accepted(self) -> None:
        """A space is a valid substring to search for."""
        assert ProductSelector.by_name(" ").value == " "

    def test_string_representation(self) -> None:
        assert str(ProductSelector.by_id("abc")) == "id='abc'"
