"""User search repository backed by the GitHub REST API."""

import asyncio
from typing import Self

import structlog

from github_user_search.configuration.models import RetryConfig
from github_user_search.schemas.filters import SearchQuery
from github_user_search.schemas.user import RateLimit, SearchResponse
from github_user_search.utils.constants import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    RATE_LIMIT_PATH,
    SEARCH_USERS_PATH,
)

from .abc import UserRepositoryBase
from .client import GitHubSearchClient
from .mapper import rate_limit_from_headers, to_rate_limit, to_search_result

logger = structlog.get_logger(__name__)


class GitHubUserRepository(UserRepositoryBase):
    """Runs user searches and rate limit lookups against GitHub."""

    def __init__(self, client: GitHubSearchClient) -> None:
        """Initialize the repository with an already-initialized search client."""
        self.client = client

    @classmethod
    def create(
        cls,
        github_token: str,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
        retry_config: RetryConfig | None = None,
        timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ) -> Self:
        """Create a repository for a GitHub instance.

        Args:
            github_token: Token sent as ``Authorization: token <token>``
            github_api_url: GitHub API URL (defaults to https://api.github.com)
            retry_config: Retry limits and delays (defaults to 3 retries, 1s base, 10s cap)
            timeout_seconds: Per-attempt HTTP timeout

        Returns:
            Configured GitHubUserRepository instance
        """
        return cls(GitHubSearchClient.create(github_token, github_api_url, retry_config, timeout_seconds))

    async def search_users(self, query: SearchQuery, cancel_event: asyncio.Event | None = None) -> SearchResponse:
        """Search users and map the response, including the rate limit it reported."""
        logger.debug("Searching users", q=query.q, sort=query.sort, order=query.order, page=query.page, per_page=query.per_page)
        body, headers = await self.client.request(SEARCH_USERS_PATH, params=query.to_params(), cancel_event=cancel_event)
        result = to_search_result(body, query.page or DEFAULT_PAGE, query.per_page or DEFAULT_PER_PAGE)
        return SearchResponse(data=result, rate_limit=rate_limit_from_headers(headers))

    async def get_rate_limit(self) -> RateLimit:
        """Get the search bucket of the rate limit endpoint."""
        body, _ = await self.client.request(RATE_LIMIT_PATH)
        return to_rate_limit(body)
