"""Utility objects shared by unit tests."""

from typing import Any

import httpx


class DummyResponse:
    """A dummy githubkit response carrying a status code, JSON body and headers."""

    def __init__(self, status_code: int = 200, body: Any = None, headers: dict[str, str] | None = None) -> None:
        """Initialize the dummy response."""
        self.status_code = status_code
        self._body = body
        self.headers = httpx.Headers(headers or {})
        self.raw_request = httpx.Request("GET", "https://api.github.com/search/users")

    @property
    def raw_response(self) -> httpx.Response:
        """The underlying httpx response, as githubkit exceptions expect."""
        if self._body is None:
            return httpx.Response(self.status_code, headers=self.headers, request=self.raw_request)
        return httpx.Response(self.status_code, json=self._body, headers=self.headers, request=self.raw_request)

    def json(self) -> Any:
        """Return the JSON body, failing like httpx does when there is none."""
        if self._body is None:
            raise ValueError("Response content is not JSON")
        return self._body


def make_api_user(user_id: int, login: str | None = None) -> dict[str, Any]:
    """Build a search result item as GitHub returns it."""
    login = login or f"user{user_id}"
    return {
        "id": user_id,
        "login": login,
        "node_id": f"MDQ6VXNlcj{user_id}",
        "avatar_url": f"https://avatars.githubusercontent.com/u/{user_id}?v=4",
        "html_url": f"https://github.com/{login}",
        "url": f"https://api.github.com/users/{login}",
        "type": "User",
        "site_admin": False,
        "score": 1.0,
    }


def make_search_body(count: int, total_count: int, start_id: int = 1, incomplete_results: bool = False) -> dict[str, Any]:
    """Build a ``/search/users`` response body with ``count`` items."""
    return {
        "total_count": total_count,
        "incomplete_results": incomplete_results,
        "items": [make_api_user(start_id + i) for i in range(count)],
    }
