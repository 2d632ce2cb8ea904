"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from threadpilot.core.config import Settings, clear_settings_cache, get_settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(database_url=None, vehicle_service_base_url=None)

        assert settings.service == "insurance"
        assert settings.request_timeout_seconds == 30.0
        assert settings.vehicle_service_timeout_seconds == 30.0
        assert settings.vehicle_service_max_attempts == 3
        assert not settings.uses_database

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVICE", "vehicle")
        monkeypatch.setenv("DATABASE_URL", "postgresql://app@localhost/threadpilot")
        monkeypatch.setenv("API_PORT", "8001")

        settings = Settings()

        assert settings.service == "vehicle"
        assert settings.uses_database
        assert settings.api_port == 8001

    @pytest.mark.parametrize(
        "overrides",
        [
            {"service": "billing"},
            {"api_env": "qa"},
            {"log_level": "VERBOSE"},
            {"database_pool_min": 5, "database_pool_max": 2},
            {"api_cors_origins": ["localhost:3000"]},
            {"vehicle_service_base_url": "vehicles:8001"},
            {"request_timeout_seconds": 0},
            {"vehicle_service_max_attempts": 0},
        ],
    )
    def test_invalid_values(self, overrides: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            Settings(**overrides)

    def test_environment_helpers(self) -> None:
        assert Settings(api_env="production").is_production
        assert Settings(api_env="development").is_development
        assert not Settings(api_env="staging").is_production

    def test_settings_are_frozen(self) -> None:
        settings = Settings()

        with pytest.raises(ValidationError):
            settings.api_port = 9000


class TestGetSettings:
    def test_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_can_be_cleared(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("APP_NAME", "Other")
        clear_settings_cache()

        second = get_settings()

        assert second is not first
        assert second.app_name == "Other"
