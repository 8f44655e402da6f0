"""Wire schemas for GitHub REST API responses.

These models mirror the JSON GitHub sends and are only used inside the
``github`` package; the mapper converts them into the application's result
schemas.
"""

from pydantic import BaseModel, ConfigDict


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class GitHubApiUser(_WireModel):
    """A user item as returned by the Search API (or the users endpoint)."""

    id: int
    login: str
    avatar_url: str
    html_url: str
    type: str
    node_id: str | None = None
    url: str | None = None
    site_admin: bool = False
    score: float | None = None
    # Only populated by the single-user endpoint, not by search results.
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    bio: str | None = None
    hireable: bool | None = None
    twitter_username: str | None = None
    public_repos: int = 0
    public_gists: int = 0
    followers: int = 0
    following: int = 0
    created_at: str | None = None
    updated_at: str | None = None


class GitHubSearchResponse(_WireModel):
    """Response body of ``GET /search/users``."""

    total_count: int
    incomplete_results: bool
    items: list[GitHubApiUser]


class GitHubRateLimitResource(_WireModel):
    """A single rate limit bucket."""

    limit: int
    remaining: int
    reset: int
    used: int = 0


class GitHubRateLimitResources(_WireModel):
    """Rate limit buckets keyed by API family."""

    core: GitHubRateLimitResource | None = None
    search: GitHubRateLimitResource
    graphql: GitHubRateLimitResource | None = None


class GitHubRateLimitResponse(_WireModel):
    """Response body of ``GET /rate_limit``."""

    resources: GitHubRateLimitResources
    rate: GitHubRateLimitResource | None = None


class GitHubApiErrorBody(_WireModel):
    """Error body GitHub returns with non-2xx responses."""

    message: str = "GitHub API error"
    documentation_url: str | None = None
    errors: list[dict[str, object]] | None = None
