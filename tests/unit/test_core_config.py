"""Unit tests for Settings (pydantic-settings)."""

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings, settings
from src.core.enums import Environment


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        config = Settings()

        assert config.environment == Environment.DEVELOPMENT
        assert config.is_development is True
        assert config.api_v1_prefix == "/api/v1"
        assert config.correlation_id_header == "Correlation-Id"
        assert config.seed_demo_data is True
        assert config.log_level == "INFO"

    def test_loads_from_environment(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("API_BASE_URL", "https://books.example.com/")
        monkeypatch.setenv("SEED_DEMO_DATA", "false")

        config = Settings()

        assert config.is_production is True
        assert config.log_level == "DEBUG"
        assert config.api_base_url == "https://books.example.com"
        assert config.seed_demo_data is False

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError, match="log_level must be one of"):
            Settings()

    def test_test_session_runs_in_testing_environment(self):
        assert settings.is_testing is True
        assert get_settings() is settings
