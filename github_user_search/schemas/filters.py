"""Pydantic schemas for user search filters and the query they translate into."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UserType = Literal["user", "org"]
SearchInField = Literal["login", "name", "email"]
SortOption = Literal["best-match", "followers", "repositories", "joined"]
SortOrder = Literal["asc", "desc"]


class RangeFilter(BaseModel):
    """Numeric constraint on a qualifier; exact wins over min/max."""

    model_config = ConfigDict(frozen=True)

    min: int | None = None
    max: int | None = None
    exact: int | None = None


class DateRangeFilter(BaseModel):
    """Date constraint on a qualifier, using YYYY-MM-DD strings; exact wins over from/to."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    exact: str | None = None


class SearchFilters(BaseModel):
    """Structured filters for a single user search.

    Attributes are snake_case; incoming payloads use the camelCase aliases
    (``searchIn``, ``isSponsored``, ``sortOrder``, ``perPage``).
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    query: str
    type: UserType | None = None
    search_in: list[SearchInField] | None = None
    repos: RangeFilter | None = None
    location: str | None = None
    language: str | None = None
    created: DateRangeFilter | None = None
    followers: RangeFilter | None = None
    is_sponsored: bool | None = None
    sort: SortOption | None = None
    sort_order: SortOrder | None = None
    page: int | None = None
    per_page: int | None = None


class SearchQuery(BaseModel):
    """Search API request parameters produced from a set of filters."""

    model_config = ConfigDict(frozen=True)

    q: str
    sort: str | None = None
    order: SortOrder | None = None
    page: int | None = None
    per_page: int | None = None

    def to_params(self) -> dict[str, Any]:
        """Return only the parameters that are defined, in request order."""
        return self.model_dump(exclude_none=True)
