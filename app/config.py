# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.BIGQUERY_PROJECT_ID)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Google credentials are NOT configured here. The BigQuery client picks them
# up from Application Default Credentials (GOOGLE_APPLICATION_CREDENTIALS,
# gcloud auth, or the metadata server).
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # BigQuery Configuration
    # -------------------------------------------------------------------------
    # Project and dataset are required - every table operation is scoped to them

    BIGQUERY_PROJECT_ID: str = Field(
        ...,
        min_length=1,
        description="Google Cloud project that owns the dataset"
    )

    BIGQUERY_DATASET_ID: str = Field(
        ...,
        min_length=1,
        description="Dataset whose tables are listed, created and deleted"
    )

    BIGQUERY_LOCATION: str | None = Field(
        default=None,
        description="Location for query jobs (e.g., US, EU, asia-northeast1)"
    )

    BIGQUERY_QUERY_TIMEOUT: float = Field(
        default=60.0,
        gt=0.0,
        le=600.0,
        description="Seconds to wait for query results before failing"
    )

    BIGQUERY_DEV_MODE: bool = Field(
        default=False,
        description="Skip client construction and serve sample data"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def dataset_path(self) -> str:
        """Fully-qualified dataset ID: project.dataset"""
        return f"{self.BIGQUERY_PROJECT_ID}.{self.BIGQUERY_DATASET_ID}"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
