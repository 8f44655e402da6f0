"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass

from github_user_search.utils.constants import (
    DEFAULT_BASE_DELAY_MS,
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_MAX_RETRIES,
)


@dataclass(frozen=True)
class RetryConfig:
    """Retry policy for a single logical GitHub API request.

    Delays are expressed in milliseconds.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay_ms: int = DEFAULT_BASE_DELAY_MS
    max_delay_ms: int = DEFAULT_MAX_DELAY_MS


@dataclass
class BaseConfig:
    """Configuration class for the GitHub User Search CLI."""

    debug: bool
    github_api_url: str
    github_token: str
    request_timeout_seconds: float
    retry: RetryConfig
