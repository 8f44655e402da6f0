"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from github_user_search.utils.constants import (
    DEFAULT_BASE_DELAY_MS,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_MAX_RETRIES,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL
    GITHUB_TOKEN: str | None = None
    REQUEST_TIMEOUT_SECONDS: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    # Retry settings
    MAX_RETRIES: int = DEFAULT_MAX_RETRIES
    BASE_DELAY_MS: int = DEFAULT_BASE_DELAY_MS
    MAX_DELAY_MS: int = DEFAULT_MAX_DELAY_MS


def get_settings() -> Settings:
    """Load settings from the environment and any .env file."""
    return Settings()
