"""Maps GitHub wire responses onto the application's result schemas."""

from typing import Any, Mapping

import httpx
import structlog
from pydantic import ValidationError

from github_user_search.exceptions import ErrorCode, GitHubApiError
from github_user_search.schemas.user import GitHubUser, RateLimit, SearchMetadata, SearchResult
from github_user_search.utils.constants import (
    GITHUB_SEARCH_RESULT_LIMIT,
    RATE_LIMIT_LIMIT_HEADER,
    RATE_LIMIT_REMAINING_HEADER,
    RATE_LIMIT_RESET_HEADER,
    RATE_LIMIT_USED_HEADER,
)

from .types import GitHubApiUser, GitHubRateLimitResponse, GitHubSearchResponse

logger = structlog.get_logger(__name__)


def _malformed(what: str, error: ValidationError) -> GitHubApiError:
    logger.error("Malformed GitHub API response", response_type=what, errors=error.errors())
    return GitHubApiError(f"Malformed {what} response from GitHub", status_code=502, code=ErrorCode.MALFORMED_RESPONSE)


def to_domain_user(api_user: GitHubApiUser) -> GitHubUser:
    """Convert a wire user into the application's user record."""
    return GitHubUser(
        id=api_user.id,
        login=api_user.login,
        avatar_url=api_user.avatar_url,
        html_url=api_user.html_url,
        type=api_user.type,
        name=api_user.name,
        company=api_user.company,
        blog=api_user.blog,
        location=api_user.location,
        email=api_user.email,
        bio=api_user.bio,
        public_repos=api_user.public_repos,
        public_gists=api_user.public_gists,
        followers=api_user.followers,
        following=api_user.following,
        created_at=api_user.created_at,
        updated_at=api_user.updated_at,
        score=api_user.score,
    )


def to_search_result(raw_response: Any, current_page: int, per_page: int) -> SearchResult:
    """Convert a ``/search/users`` body into a page of results.

    The total count is capped at the Search API's 1000-result visibility
    ceiling, and ``has_next_page`` is derived from the capped value so callers
    are never told about pages GitHub will refuse to serve.

    Raises:
        GitHubApiError: MALFORMED_RESPONSE if the body does not match the schema.
    """
    try:
        response = GitHubSearchResponse.model_validate(raw_response)
    except ValidationError as e:
        raise _malformed("search", e) from e

    capped_total_count = min(response.total_count, GITHUB_SEARCH_RESULT_LIMIT)
    has_next_page = len(response.items) >= per_page and current_page * per_page < capped_total_count

    logger.debug(
        "Mapped search response",
        current_page=current_page,
        per_page=per_page,
        items=len(response.items),
        total_count=response.total_count,
        capped_total_count=capped_total_count,
        has_next_page=has_next_page,
    )

    return SearchResult(
        users=[to_domain_user(item) for item in response.items],
        metadata=SearchMetadata(
            total_count=capped_total_count,
            incomplete_results=response.incomplete_results,
            current_page=current_page,
            per_page=per_page,
            has_next_page=has_next_page,
        ),
    )


def to_rate_limit(raw_response: Any) -> RateLimit:
    """Convert a ``/rate_limit`` body into the search bucket's rate limit."""
    try:
        response = GitHubRateLimitResponse.model_validate(raw_response)
    except ValidationError as e:
        raise _malformed("rate limit", e) from e

    search = response.resources.search
    return RateLimit(limit=search.limit, remaining=search.remaining, reset=search.reset, used=search.used)


def rate_limit_from_headers(headers: Mapping[str, str] | httpx.Headers) -> RateLimit | None:
    """Read the rate limit reported in response headers.

    Returns None unless the limit, remaining and reset headers are all present
    and numeric. A missing used header counts as zero.
    """
    headers = httpx.Headers(headers)
    limit = headers.get(RATE_LIMIT_LIMIT_HEADER)
    remaining = headers.get(RATE_LIMIT_REMAINING_HEADER)
    reset = headers.get(RATE_LIMIT_RESET_HEADER)
    if not (limit and remaining and reset):
        return None
    try:
        return RateLimit(
            limit=int(limit),
            remaining=int(remaining),
            reset=int(reset),
            used=int(headers.get(RATE_LIMIT_USED_HEADER) or 0),
        )
    except ValueError:
        logger.warning("Ignoring non-numeric rate limit headers", limit=limit, remaining=remaining, reset=reset)
        return None
