"""Unit tests for Settings loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.core.config import Settings, settings
from src.core.enums import Environment


@pytest.mark.unit
class TestSettings:
    def test_test_session_runs_in_testing_mode(self):
        assert settings.environment == Environment.TESTING
        assert settings.is_testing
        assert not settings.is_production

    def test_casbin_files_exist(self):
        assert Path(settings.casbin_model_path).is_file()
        assert Path(settings.casbin_policy_path).is_file()

    def test_trailing_slashes_stripped(self):
        config = Settings(api_base_url="https://gw.example.com/", api_v1_prefix="/v1/")

        assert config.api_base_url == "https://gw.example.com"
        assert config.api_v1_prefix == "/v1"

    def test_cors_origin_list(self):
        config = Settings(cors_origins="https://a.example.com, ,https://b.example.com")

        assert config.cors_origin_list == [
            "https://a.example.com",
            "https://b.example.com",
        ]

    @pytest.mark.parametrize("rounds", [9, 21])
    def test_bcrypt_rounds_bounds(self, rounds):
        with pytest.raises(ValidationError, match="bcrypt_rounds"):
            Settings(bcrypt_rounds=rounds)

    def test_short_secret_key_rejected(self):
        with pytest.raises(ValidationError, match="secret_key"):
            Settings(secret_key="short")

    def test_default_page_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(default_page_limit=0)

    def test_environment_variable_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PAGE_LIMIT", "50")
        monkeypatch.setenv("ENVIRONMENT", "production")

        config = Settings()

        assert config.default_page_limit == 50
        assert config.is_production
