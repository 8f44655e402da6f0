"""Base ABC for user search repositories."""

import asyncio
from abc import ABC, abstractmethod

from github_user_search.schemas.filters import SearchQuery
from github_user_search.schemas.user import RateLimit, SearchResponse


class UserRepositoryBase(ABC):
    """Base ABC for user search repositories."""

    @abstractmethod
    async def search_users(self, query: SearchQuery, cancel_event: asyncio.Event | None = None) -> SearchResponse:
        """Search users with already-built Search API parameters."""
        pass

    @abstractmethod
    async def get_rate_limit(self) -> RateLimit:
        """Get the current search rate limit."""
        pass
