"""User search use cases: validate, build the query, call GitHub, map results."""

import asyncio
from typing import Any, AsyncIterator, Mapping

import structlog

from github_user_search.configuration.models import BaseConfig
from github_user_search.github.abc import UserRepositoryBase
from github_user_search.github.adapter import GitHubUserRepository
from github_user_search.query.builder import build_search_query
from github_user_search.schemas.filters import SearchFilters
from github_user_search.schemas.user import RateLimit, SearchResponse
from github_user_search.utils.constants import DEFAULT_PAGE, DEFAULT_PER_PAGE, DEFAULT_SORT, DEFAULT_SORT_ORDER
from github_user_search.validation.validator import max_page_for, parse_search_filters

logger = structlog.get_logger(__name__)


def normalize_filters(filters: SearchFilters) -> SearchFilters:
    """Trim the query and fill in pagination and sort defaults."""
    return filters.model_copy(
        update={
            "query": filters.query.strip(),
            "page": filters.page if filters.page is not None else DEFAULT_PAGE,
            "per_page": filters.per_page if filters.per_page is not None else DEFAULT_PER_PAGE,
            "sort": filters.sort if filters.sort is not None else DEFAULT_SORT,
            "sort_order": filters.sort_order if filters.sort_order is not None else DEFAULT_SORT_ORDER,
        }
    )


class SearchUsersService:
    """Entry point for user searches.

    The service is stateless: filters come in with each call and results go
    back out, so one instance can serve any number of callers.
    """

    def __init__(self, repository: UserRepositoryBase) -> None:
        """Initialize the service with a user repository."""
        self.repository = repository

    async def search(
        self,
        filters: Mapping[str, Any] | SearchFilters,
        cancel_event: asyncio.Event | None = None,
    ) -> SearchResponse:
        """Run a single page of a user search.

        Args:
            filters: Raw camelCase payload or ``SearchFilters``.
            cancel_event: Optional event that aborts the request when set.

        Returns:
            The page of results with the rate limit reported by GitHub.

        Raises:
            SearchValidationError: If the filters are invalid; no request is made.
            GitHubApiError: If GitHub cannot serve the request.
        """
        validated = normalize_filters(parse_search_filters(filters))
        query = build_search_query(validated)
        logger.info("Executing user search", q=query.q, page=query.page, per_page=query.per_page)
        return await self.repository.search_users(query, cancel_event=cancel_event)

    async def iter_pages(
        self,
        filters: Mapping[str, Any] | SearchFilters,
        max_pages: int | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> AsyncIterator[SearchResponse]:
        """Yield successive pages until GitHub reports no next page.

        Starts at the requested page (or the first) and stops at the result
        visibility ceiling, after ``max_pages`` pages, or when the cancel event
        is set between pages.
        """
        current = normalize_filters(parse_search_filters(filters))
        last_page = max_page_for(current.per_page)
        pages_fetched = 0

        while True:
            response = await self.search(current, cancel_event=cancel_event)
            pages_fetched += 1
            yield response

            if not response.data.metadata.has_next_page:
                break
            if max_pages is not None and pages_fetched >= max_pages:
                logger.info("Reached page limit for search", q=current.query, pages_fetched=pages_fetched)
                break
            if cancel_event is not None and cancel_event.is_set():
                break

            next_page = (current.page or DEFAULT_PAGE) + 1
            if next_page > last_page:
                break
            current = current.model_copy(update={"page": next_page})

    async def get_rate_limit(self) -> RateLimit:
        """Fetch the current search rate limit, propagating failures."""
        return await self.repository.get_rate_limit()

    async def poll_rate_limit(self) -> RateLimit | None:
        """Best-effort rate limit refresh for background polling.

        Failures are logged and None is returned so the caller keeps whatever
        state it already had.
        """
        try:
            return await self.repository.get_rate_limit()
        except Exception as e:
            logger.warning("Could not refresh rate limit", error=str(e), error_type=type(e).__name__)
            return None


def create_search_service(config: BaseConfig) -> SearchUsersService:
    """Build a search service backed by GitHub from reconciled configuration."""
    repository = GitHubUserRepository.create(
        github_token=config.github_token,
        github_api_url=config.github_api_url,
        retry_config=config.retry,
        timeout_seconds=config.request_timeout_seconds,
    )
    return SearchUsersService(repository)
