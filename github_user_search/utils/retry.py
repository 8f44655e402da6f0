"""Backoff helpers for retrying GitHub API requests.

This module computes retry delays that respect GitHub's ``x-ratelimit-reset``
header, falling back to capped exponential backoff with jitter, and decides
which transport failures are worth retrying.
"""

import asyncio
import random
import time
from typing import Callable

import httpx
import structlog
from githubkit.exception import RequestError, RequestTimeout

from github_user_search.configuration.models import RetryConfig
from github_user_search.utils.constants import JITTER_RATIO

logger = structlog.get_logger(__name__)


def _now_ms() -> float:
    return time.time() * 1000


def reset_header_delay(reset_header: str | None, max_delay_ms: int, now_ms: float) -> int | None:
    """Milliseconds until the rate limit window resets, if usable.

    The hint is only used when it is positive and shorter than the maximum
    delay; anything else yields None so the caller falls back to exponential
    backoff.
    """
    if not reset_header:
        return None
    try:
        reset_timestamp_ms = int(reset_header) * 1000
    except ValueError:
        logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=reset_header)
        return None
    wait_ms = reset_timestamp_ms - now_ms
    if 0 < wait_ms < max_delay_ms:
        return int(wait_ms)
    return None


def exponential_delay(attempt: int, retry_config: RetryConfig) -> int:
    """Capped exponential delay for an attempt, before jitter."""
    return min(retry_config.base_delay_ms * 2**attempt, retry_config.max_delay_ms)


def compute_backoff_delay(
    attempt: int,
    reset_header: str | None = None,
    *,
    retry_config: RetryConfig,
    now_ms: Callable[[], float] = _now_ms,
    rand: Callable[[], float] = random.random,
) -> int:
    """Compute how long to wait before the next attempt, in milliseconds.

    Args:
        attempt: Zero-based count of attempts made so far.
        reset_header: Raw ``x-ratelimit-reset`` value (unix seconds), if any.
        retry_config: Base and maximum delays.
        now_ms: Clock returning the current time in milliseconds.
        rand: Random source in [0, 1).

    Returns:
        The delay in whole milliseconds.
    """
    reset_delay = reset_header_delay(reset_header, retry_config.max_delay_ms, now_ms())
    if reset_delay is not None:
        return reset_delay

    delay = exponential_delay(attempt, retry_config)
    jitter = delay * JITTER_RATIO * (rand() - 0.5)
    return int(delay + jitter)


def is_retryable_error(error: BaseException) -> bool:
    """Whether a request failure is a network or timeout problem worth retrying."""
    return isinstance(
        error,
        (
            RequestError,
            RequestTimeout,
            httpx.TransportError,
            TimeoutError,
            ConnectionError,
        ),
    )


async def sleep_with_cancel(delay_seconds: float, cancel_event: asyncio.Event | None = None) -> bool:
    """Sleep for a delay, waking early if the cancel event is set.

    Returns:
        True if the sleep was interrupted by cancellation.
    """
    if cancel_event is None:
        await asyncio.sleep(delay_seconds)
        return False
    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=delay_seconds)
    except asyncio.TimeoutError:
        return False
    return True
