"""Tests for ExpirationStatus value object."""

from __future__ import annotations

from src.domain.value_objects import ExpirationStatus


class TestExpirationStatus:
    """Tests for ExpirationStatus enum."""

    def test_status_string_representation(self) -> None:
        """Status should render as its lowercase value."""
        assert str(ExpirationStatus.EXPIRED) == "expired"
        assert str(ExpirationStatus.DANGER) == "danger"
        assert str(ExpirationStatus.WARNING) == "warning"
        assert str(ExpirationStatus.SAFE) == "safe"
