"""Tests for environment-based settings."""

from __future__ import annotations

import pytest

from src.application.exceptions import ConfigurationError
from src.infrastructure.config import Settings, load_settings
from src.main import ApplicationContainer
from src.infrastructure.adapters import CosmosProductStore, InMemoryProductStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "STORE_BACKEND",
        "COSMOS_ENDPOINT",
        "COSMOS_KEY",
        "DANGER_THRESHOLD_DAYS",
        "WARNING_THRESHOLD_DAYS",
        "CORS_ORIGINS",
        "API_PORT",
    ):
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.store_backend == "memory"
        assert settings.api_port == 3000
        assert settings.cors_origins == ["*"]
        assert settings.thresholds.danger == 7
        assert settings.thresholds.warning == 30

    def test_custom_thresholds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DANGER_THRESHOLD_DAYS", "3")
        monkeypatch.setenv("WARNING_THRESHOLD_DAYS", "14")
        assert load_settings().thresholds.warning == 14

    def test_misordered_thresholds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DANGER_THRESHOLD_DAYS", "40")
        with pytest.raises(ValueError, match="Thresholds must be"):
            load_settings()

    def test_non_integer_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_PORT", "eighty")
        with pytest.raises(ConfigurationError, match="API_PORT"):
            load_settings()

    def test_unknown_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORE_BACKEND", "mongo")
        with pytest.raises(ConfigurationError, match="STORE_BACKEND"):
            load_settings()

    def test_cosmos_requires_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORE_BACKEND", "cosmos")
        monkeypatch.setenv("COSMOS_ENDPOINT", "https://example.documents.azure.com")
        with pytest.raises(ConfigurationError, match="COSMOS_KEY"):
            load_settings()

    def test_cors_origins_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
        assert Settings().cors_origins == ["http://a.test", "http://b.test"]


class TestApplicationContainer:
    def test_memory_backend(self) -> None:
        store = ApplicationContainer(load_settings()).create_product_store()
        assert isinstance(store, InMemoryProductStore)

    def test_cosmos_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORE_BACKEND", "cosmos")
        monkeypatch.setenv("COSMOS_ENDPOINT", "https://example.documents.azure.com")
        monkeypatch.setenv("COSMOS_KEY", "secret")
        store = ApplicationContainer(load_settings()).create_product_store()
        assert isinstance(store, CosmosProductStore)

    def test_creates_app(self) -> None:
        app = ApplicationContainer(load_settings()).create_app()
        assert app.title == "Inventory Expiration API"
