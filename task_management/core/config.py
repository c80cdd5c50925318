"""Application configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from task_management.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application settings
    APP_NAME: str = "Task Management API"
    APP_VERSION: str = Field(default=__version__)
    APP_DESCRIPTION: str = "Search view models and form validation for task management"
    DEBUG: bool = Field(default=False)

    # API settings
    API_V1_PREFIX: str = "/api/v1"

    # CORS settings
    CORS_ORIGINS: list[str] = Field(default=["http://localhost:3000", "http://localhost:8080"])

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Root log level applied at startup")

    # Search pagination
    MAX_PAGE_SIZE: int = Field(
        default=100,
        ge=1,
        description="Largest page size accepted by search request validation",
    )


# Global settings instance
settings = Settings()
