"""Pydantic schemas for search results returned to callers."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class GitHubUser(_ResultModel):
    """A GitHub account as exposed by this application."""

    id: int
    login: str
    avatar_url: str
    html_url: str
    type: str
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    bio: str | None = None
    public_repos: int = 0
    public_gists: int = 0
    followers: int = 0
    following: int = 0
    created_at: str | None = None
    updated_at: str | None = None
    score: float | None = None


class SearchMetadata(_ResultModel):
    """Pagination metadata for a page of search results."""

    total_count: int
    incomplete_results: bool
    current_page: int
    per_page: int
    has_next_page: bool


class SearchResult(_ResultModel):
    """One page of users plus its pagination metadata."""

    users: list[GitHubUser]
    metadata: SearchMetadata


class RateLimit(_ResultModel):
    """Search API rate limit state."""

    limit: int
    remaining: int
    reset: int
    used: int


class SearchResponse(_ResultModel):
    """Result of a search call together with the rate limit reported by that call."""

    data: SearchResult
    rate_limit: RateLimit | None = None
