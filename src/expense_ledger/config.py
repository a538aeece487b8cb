"""Centralized configuration management using pydantic-settings.

Configuration is loaded from environment variables with sensible defaults.
All settings can be overridden via environment variables or a .env file.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENTITY_COLOR = "#3B82F6"


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Override via environment variables (prefixed with EXL_) or .env file.

    Examples:
        EXL_LOG_LEVEL=DEBUG
        EXL_ENVIRONMENT=production
        EXL_DEFAULT_ENTITY_COLOR=#10B981
    """

    model_config = SettingsConfigDict(
        env_prefix="EXL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Expense Ledger"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] | None = Field(
        default=None,
        validate_default=True,
        description="Log output format: 'json' for production, 'console' for development",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # Entities
    default_entity_color: str = Field(
        default=DEFAULT_ENTITY_COLOR,
        description="Color tag given to new entities when none is supplied",
    )

    # Display rounding
    category_percentage_places: int = Field(default=0, ge=0, le=6)
    share_percentage_places: int = Field(default=1, ge=0, le=6)

    @field_validator("default_entity_color", mode="after")
    @classmethod
    def validate_color_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_entity_color must not be blank")
        return v

    @field_validator("log_format", mode="after")
    @classmethod
    def set_log_format_from_environment(cls, v: str | None, info) -> str:
        """Default to JSON logging in production."""
        if v is None:
            if info.data.get("environment") == Environment.PRODUCTION:
                return "json"
            return "console"
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
