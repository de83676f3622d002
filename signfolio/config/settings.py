"""
Application Settings.

Centralized configuration using Pydantic Settings with environment variable loading.

The Notion credentials are optional at load time: a missing key or database id
never prevents the package from importing. Call check_configuration() once at
startup to report (or fail fast on) missing values; every Notion request made
without them raises ConfigurationError.

Production Mode:
    When app_env="production", additional validations apply:
    - debug must be False
    - cors_allowed_origins cannot be ["*"]
"""

from functools import lru_cache
from typing import Literal, Optional

import structlog
from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from signfolio.core.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Notion (Content Source)
    # -------------------------------------------------------------------------
    notion_api_key: SecretStr | None = Field(
        default=None, description="Notion integration token"
    )
    notion_database_id: str | None = Field(
        default=None, description="Notion database holding portfolio pages"
    )
    notion_api_base: str = Field(
        default="https://api.notion.com/v1",
        description="Notion REST API base URL",
    )
    notion_version: str = Field(
        default="2022-06-28",
        description="Value sent in the Notion-Version header",
    )
    notion_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for every Notion request in seconds",
    )

    # -------------------------------------------------------------------------
    # Site
    # -------------------------------------------------------------------------
    site_url: str = Field(
        default="https://theopeningsign.vercel.app",
        description="Public base URL used in the sitemap and robots.txt",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    api_host: str = Field(default="0.0.0.0", description="Bind address for uvicorn")
    api_port: int = Field(default=8000, description="Bind port for uvicorn")

    # -------------------------------------------------------------------------
    # CORS Settings
    # -------------------------------------------------------------------------
    cors_allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins. Use ['*'] for development only.",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env == "development"

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production settings are secure."""
        if self.app_env == "production":
            errors = []

            if self.debug:
                errors.append("debug must be False in production")

            if "*" in self.cors_allowed_origins:
                errors.append("cors_allowed_origins cannot contain '*' in production")

            if errors:
                raise ValueError(
                    f"Production configuration errors: {'; '.join(errors)}"
                )

        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()


def missing_notion_settings(settings: Settings) -> list[str]:
    """Return the environment names of required Notion settings that are unset."""
    missing = []
    if settings.notion_api_key is None or not settings.notion_api_key.get_secret_value():
        missing.append("NOTION_API_KEY")
    if not settings.notion_database_id:
        missing.append("NOTION_DATABASE_ID")
    return missing


def check_configuration(
    settings: Optional[Settings] = None,
    *,
    strict: bool = False,
) -> bool:
    """
    Verify the Notion settings once at startup.

    Args:
        settings: Settings to check. Defaults to get_settings().
        strict: Raise instead of logging when something is missing.

    Returns:
        True if the content source is fully configured.

    Raises:
        ConfigurationError: If strict is set and a setting is missing.
    """
    settings = settings or get_settings()
    missing = missing_notion_settings(settings)
    if not missing:
        return True

    if strict:
        raise ConfigurationError(
            f"Missing required settings: {', '.join(missing)}",
            config_key=missing[0],
        )

    logger.warning("notion_settings_missing", missing=missing)
    return False
