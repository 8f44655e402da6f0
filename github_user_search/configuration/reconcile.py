"""Reconciles configuration between CLI arguments and environment variables."""

from typing import TypeVar

import structlog

from github_user_search.configuration.env import Settings, get_settings
from github_user_search.configuration.exceptions import RequiredConfigurationElementError
from github_user_search.configuration.models import BaseConfig, RetryConfig

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _prefer_cli(cli_value: T | None, env_value: T) -> T:
    """Return the CLI value when one was given, otherwise the environment value."""
    return cli_value if cli_value is not None else env_value


async def validate_github_token_configuration(github_token: str | None) -> str:
    """Validates that a GitHub token is available.

    Args:
        github_token (str | None): The GitHub token resolved from the CLI or environment.

    Raises:
        RequiredConfigurationElementError: If no usable token is defined.

    Returns:
        str: The stripped token.
    """
    if github_token is None or not github_token.strip():
        raise RequiredConfigurationElementError(
            name="GitHub token",
            cli_name="--github-token",
            env_name="GITHUB_TOKEN",
        )
    return github_token.strip()


async def reconcile_base_configuration(
    cli_debug: bool | None = None,
    cli_github_api_url: str | None = None,
    cli_github_token: str | None = None,
    cli_request_timeout_seconds: float | None = None,
    cli_max_retries: int | None = None,
    cli_base_delay_ms: int | None = None,
    cli_max_delay_ms: int | None = None,
    settings: Settings | None = None,
) -> BaseConfig:
    """Reconciles CLI arguments with environment settings, preferring CLI values."""
    settings = settings or get_settings()

    github_token = await validate_github_token_configuration(_prefer_cli(cli_github_token, settings.GITHUB_TOKEN))
    retry = RetryConfig(
        max_retries=_prefer_cli(cli_max_retries, settings.MAX_RETRIES),
        base_delay_ms=_prefer_cli(cli_base_delay_ms, settings.BASE_DELAY_MS),
        max_delay_ms=_prefer_cli(cli_max_delay_ms, settings.MAX_DELAY_MS),
    )
    config = BaseConfig(
        debug=_prefer_cli(cli_debug, settings.DEBUG),
        github_api_url=_prefer_cli(cli_github_api_url, settings.GITHUB_API_URL),
        github_token=github_token,
        request_timeout_seconds=_prefer_cli(cli_request_timeout_seconds, settings.REQUEST_TIMEOUT_SECONDS),
        retry=retry,
    )
    logger.debug(
        "Reconciled configuration",
        github_api_url=config.github_api_url,
        max_retries=retry.max_retries,
        base_delay_ms=retry.base_delay_ms,
        max_delay_ms=retry.max_delay_ms,
    )
    return config
