"""GitHub REST API access for user search."""

from .adapter import GitHubUserRepository
from .client import GitHubSearchClient, get_github_token_client

__all__ = ["GitHubUserRepository", "GitHubSearchClient", "get_github_token_client"]
