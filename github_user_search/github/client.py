"""Sets up the authenticated githubkit client and the resilient request loop."""

import asyncio
from typing import Any, Awaitable, Callable

import httpx
import structlog
from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy
from githubkit.exception import RequestFailed

from github_user_search.configuration.models import RetryConfig
from github_user_search.exceptions import ErrorCode, GitHubApiError, RequestCancelledError
from github_user_search.utils.constants import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    RATE_LIMIT_REMAINING_HEADER,
    RATE_LIMIT_RESET_HEADER,
    SEARCH_ACCEPT_HEADER,
    USER_AGENT,
)
from github_user_search.utils.retry import compute_backoff_delay, is_retryable_error, sleep_with_cancel

from .types import GitHubApiErrorBody

logger = structlog.get_logger(__name__)

SleepFunc = Callable[[float, asyncio.Event | None], Awaitable[bool]]


def get_github_token_client(
    github_token: str,
    github_api_url: str = DEFAULT_GITHUB_API_URL,
    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
) -> GitHub[TokenAuthStrategy]:
    """Returns a githubkit client authenticated with a token.

    githubkit's own retry and HTTP cache are disabled; ``GitHubSearchClient``
    owns the retry policy and every search must hit the API.
    """
    if not github_token:
        raise RuntimeError("GitHub token authentication requires github_token in config.")
    return GitHub(
        TokenAuthStrategy(github_token),
        base_url=github_api_url,
        user_agent=USER_AGENT,
        timeout=timeout_seconds,
        http_cache=False,
        auto_retry=False,
    )


def is_rate_limited(status_code: int, headers: httpx.Headers) -> bool:
    """Whether a response signals primary rate limit exhaustion."""
    return status_code == 403 and headers.get(RATE_LIMIT_REMAINING_HEADER) == "0"


def classify_error(status_code: int, body: Any) -> GitHubApiError:
    """Map a non-2xx response onto a terminal, classified error."""
    try:
        message = GitHubApiErrorBody.model_validate(body or {}).message
    except ValueError:
        message = "GitHub API error"

    if status_code == 401:
        return GitHubApiError("GitHub API authentication failed. Check your token.", 401, ErrorCode.AUTHENTICATION_FAILED)
    if status_code == 404:
        return GitHubApiError("Resource not found", 404, ErrorCode.NOT_FOUND)
    if status_code == 422:
        return GitHubApiError(f"Validation failed: {message}", 422, ErrorCode.VALIDATION_ERROR)
    return GitHubApiError(message, status_code, ErrorCode.GITHUB_API_ERROR)


def _error_body(response: Any) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class GitHubSearchClient:
    """Issues GitHub API GET requests with rate-limit aware retries.

    Retry state lives in each ``request`` call; nothing is shared between
    calls, so a single client can serve concurrent searches.
    """

    def __init__(
        self,
        github: GitHub[Any],
        retry_config: RetryConfig | None = None,
        sleep: SleepFunc = sleep_with_cancel,
    ) -> None:
        """Initialize the client with an already-initialized githubkit client."""
        self.github = github
        self.retry_config = retry_config or RetryConfig()
        self._sleep = sleep

    @classmethod
    def create(
        cls,
        github_token: str,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
        retry_config: RetryConfig | None = None,
        timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ) -> "GitHubSearchClient":
        """Create a client for a GitHub instance authenticated with a token."""
        logger.info("Creating search client for GitHub instance", github_api_url=github_api_url)
        return cls(get_github_token_client(github_token, github_api_url, timeout_seconds), retry_config)

    async def _backoff(self, delay_ms: int, cancel_event: asyncio.Event | None) -> None:
        if await self._sleep(delay_ms / 1000, cancel_event):
            logger.info("Request cancelled during backoff", delay_ms=delay_ms)
            raise RequestCancelledError()

    async def request(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> tuple[Any, httpx.Headers]:
        """Perform a GET request, retrying rate limits and network failures.

        Args:
            path: API path relative to the configured base URL, e.g. "/search/users".
            params: Query parameters; only defined values should be passed.
            cancel_event: Optional event that aborts the request when set. It is
                checked before each attempt and wakes any backoff sleep.

        Returns:
            The decoded JSON body and the response headers.

        Raises:
            GitHubApiError: RATE_LIMIT_EXCEEDED once retries are exhausted,
                AUTHENTICATION_FAILED, NOT_FOUND, VALIDATION_ERROR or
                GITHUB_API_ERROR for other failures, FETCH_ERROR for transport
                failures that cannot be retried.
            RequestCancelledError: If the cancel event is set.
        """
        max_retries = self.retry_config.max_retries
        attempt = 0

        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise RequestCancelledError()

            try:
                response = await self.github.arequest(
                    "GET",
                    path,
                    params=params,
                    headers={"Accept": SEARCH_ACCEPT_HEADER},
                )
                body = response.json()
            except RequestFailed as e:
                status_code = e.response.status_code
                headers = httpx.Headers(e.response.headers)

                if not is_rate_limited(status_code, headers):
                    error = classify_error(status_code, _error_body(e.response))
                    logger.error("GitHub API request failed", path=path, status_code=status_code, code=error.code)
                    raise error from e

                if attempt >= max_retries:
                    logger.error(
                        "Max retries reached for GitHub rate limit error",
                        path=path,
                        attempt=attempt + 1,
                        rate_limit_reset=headers.get(RATE_LIMIT_RESET_HEADER),
                    )
                    raise GitHubApiError(
                        "Rate limit exceeded and max retries reached",
                        429,
                        ErrorCode.RATE_LIMIT_EXCEEDED,
                    ) from e

                delay_ms = compute_backoff_delay(
                    attempt,
                    headers.get(RATE_LIMIT_RESET_HEADER),
                    retry_config=self.retry_config,
                )
                logger.warning(
                    f"GitHub rate limit exceeded, retrying in {delay_ms}ms",
                    path=path,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    wait_ms=delay_ms,
                )
                await self._backoff(delay_ms, cancel_event)
                attempt += 1
                continue
            except Exception as e:
                if attempt < max_retries and is_retryable_error(e):
                    delay_ms = compute_backoff_delay(attempt, retry_config=self.retry_config)
                    logger.warning(
                        f"Request failed, retrying in {delay_ms}ms",
                        path=path,
                        attempt=attempt + 1,
                        max_retries=max_retries,
                        wait_ms=delay_ms,
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    await self._backoff(delay_ms, cancel_event)
                    attempt += 1
                    continue

                logger.error(
                    "GitHub API request could not be completed",
                    path=path,
                    attempt=attempt + 1,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise GitHubApiError(str(e) or "Unknown error occurred", 500, ErrorCode.FETCH_ERROR) from e

            return body, response.headers
