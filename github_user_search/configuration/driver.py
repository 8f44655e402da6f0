"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio

from github_user_search.configuration import reconcile
from github_user_search.configuration.models import BaseConfig


def get_base_config(
    debug: bool | None = None,
    github_api_url: str | None = None,
    github_token: str | None = None,
    request_timeout_seconds: float | None = None,
    max_retries: int | None = None,
    base_delay_ms: int | None = None,
    max_delay_ms: int | None = None,
) -> BaseConfig:
    """Synchronously get the reconciled base configuration."""
    return asyncio.run(
        reconcile.reconcile_base_configuration(
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_token=github_token,
            cli_request_timeout_seconds=request_timeout_seconds,
            cli_max_retries=max_retries,
            cli_base_delay_ms=base_delay_ms,
            cli_max_delay_ms=max_delay_ms,
        )
    )
