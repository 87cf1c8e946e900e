"""Unit tests for Settings (pydantic-settings)."""

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.enums import Environment


@pytest.mark.unit
class TestSettings:
    """Test configuration parsing and validation."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SECRET_KEY", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.secret_key is None
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.is_development

    def test_blank_secret_is_unset(self, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "   ")

        assert Settings().secret_key is None

    @pytest.mark.parametrize("rounds", ["3", "32"])
    def test_bcrypt_rounds_out_of_range(self, monkeypatch, rounds):
        monkeypatch.setenv("BCRYPT_ROUNDS", rounds)

        with pytest.raises(ValidationError):
            Settings()

    def test_trailing_slash_stripped_from_base_url(self, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "https://api.example.com/")

        assert Settings().api_base_url == "https://api.example.com"

    def test_cors_origin_list(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,,")

        assert Settings().cors_origin_list == ["http://a.test", "http://b.test"]

    def test_environment_flags(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings()

        assert settings.is_production
        assert not settings.is_testing
