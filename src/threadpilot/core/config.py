# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Configuration management using Pydantic Settings."""

from beartype import beartype
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings for both services, read once from the environment."""

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
        frozen=True,
        validate_default=True,
        extra="forbid",
    )

    # Service selection
    service: str = Field(
        default="insurance",
        pattern="^(insurance|vehicle)$",
        description="Which service main() serves",
    )

    # Database (optional; seeded in-memory stores are used when unset)
    database_url: str | None = Field(
        default=None,
        description="PostgreSQL connection URL",
    )
    database_pool_min: int = Field(
        default=2,
        ge=1,
        le=20,
        description="Minimum database pool size",
    )
    database_pool_max: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum database pool size",
    )
    database_command_timeout: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Query execution timeout in seconds",
    )

    # Vehicle service
    vehicle_service_base_url: str | None = Field(
        default=None,
        description="Base URL of the vehicle service; in-process lookup when unset",
    )
    vehicle_service_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        le=120.0,
        description="Per-request timeout for vehicle lookups",
    )
    vehicle_service_max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts per vehicle lookup, including the first",
    )
    vehicle_service_retry_delay_seconds: float = Field(
        default=0.2,
        ge=0.0,
        le=10.0,
        description="Initial backoff between vehicle lookup attempts",
    )

    # API Configuration
    app_name: str = Field(
        default="ThreadPilot",
        description="Application name",
        min_length=1,
    )
    api_host: str = Field(
        default="0.0.0.0",  # nosec B104 - Binding to all interfaces is needed for containerized deployment
        description="API host to bind to",
    )
    api_port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="API port to bind to",
    )
    api_env: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="API environment",
    )
    api_cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Allowed CORS origins",
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level",
    )

    # Performance
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        le=300.0,
        description="Upper bound for serving a single request",
    )

    @field_validator("database_pool_max")
    @classmethod
    def validate_pool_sizes(cls: type["Settings"], v: int, info: ValidationInfo) -> int:
        """The pool cannot be capped below its minimum size."""
        if "database_pool_min" in info.data:
            min_size = info.data["database_pool_min"]
            if v < min_size:
                raise ValueError(
                    f"database_pool_max ({v}) must be >= database_pool_min ({min_size})"
                )
        return v

    @field_validator("api_cors_origins")
    @classmethod
    def validate_cors_origins(cls: type["Settings"], v: list[str]) -> list[str]:
        """CORS origins must be absolute http(s) origins."""
        for origin in v:
            if not origin.startswith(("http://", "https://")):
                raise ValueError(f"Invalid CORS origin: {origin}")
        return v

    @field_validator("vehicle_service_base_url")
    @classmethod
    def validate_vehicle_service_url(cls: type["Settings"], v: str | None) -> str | None:
        """Require an absolute http(s) URL when the vehicle service is remote."""
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid vehicle service URL: {v}")
        return v

    @property
    @beartype
    def is_production(self) -> bool:
        """Production mode hides the OpenAPI docs."""
        return self.api_env == "production"

    @property
    @beartype
    def is_development(self) -> bool:
        """Development mode enables reload and the interactive docs."""
        return self.api_env == "development"

    @property
    @beartype
    def uses_database(self) -> bool:
        """Whether stores are backed by PostgreSQL instead of seed data."""
        return self.database_url is not None


_settings: Settings | None = None


@beartype
def get_settings() -> Settings:
    """Settings for this process, loaded on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


@beartype
def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
