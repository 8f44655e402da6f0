"""Pre-flight validation of user search filters.

Validation runs on the raw payload (camelCase keys as received from a JSON
body, or the snake_case field names the model also accepts) so that values a
model would silently coerce, such as ``True`` for a page number or ``"5"`` for
a follower count, are rejected with a stable error code before any network
activity.
"""

import math
import re
from datetime import datetime
from typing import Any, Mapping

import structlog
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from github_user_search.exceptions import ErrorCode, SearchValidationError
from github_user_search.schemas.filters import SearchFilters
from github_user_search.utils.constants import (
    DEFAULT_PER_PAGE,
    GITHUB_SEARCH_RESULT_LIMIT,
    MAX_PER_PAGE,
    MAX_QUERY_LENGTH,
)

logger = structlog.get_logger(__name__)

DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

RANGE_FIELDS = ("repos", "followers")
RANGE_KEYS = ("min", "max", "exact")
DATE_KEYS = ("from", "to", "exact")


def _is_integer(value: Any) -> bool:
    """Whether value is an integer; bools are rejected and integral floats accepted."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def is_valid_date(value: Any) -> bool:
    """Whether value is a calendar-valid YYYY-MM-DD string."""
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def max_page_for(per_page: Any) -> int:
    """Highest page reachable within the result visibility ceiling for a page size."""
    if not _is_integer(per_page) or per_page < 1:
        per_page = DEFAULT_PER_PAGE
    return math.floor(GITHUB_SEARCH_RESULT_LIMIT / int(per_page))


def _validate_query(filters: Mapping[str, Any]) -> None:
    query = filters.get("query")
    if not isinstance(query, str) or not query.strip():
        raise SearchValidationError(ErrorCode.MISSING_QUERY, "query", "Search query is required")
    if len(query) > MAX_QUERY_LENGTH:
        raise SearchValidationError(
            ErrorCode.QUERY_TOO_LONG,
            "query",
            f"Search query is too long (max {MAX_QUERY_LENGTH} characters)",
        )


def _validate_pagination(filters: Mapping[str, Any]) -> None:
    page = filters.get("page")
    per_page = filters.get("perPage")

    if page is not None:
        if not _is_integer(page) or page < 1:
            raise SearchValidationError(ErrorCode.INVALID_PAGE, "page", "Page must be a positive integer")
        max_page = max_page_for(per_page)
        if page > max_page:
            raise SearchValidationError(
                ErrorCode.PAGE_TOO_HIGH,
                "page",
                f"Page number too high (max {max_page} for current perPage)",
            )

    if per_page is not None:
        if not _is_integer(per_page) or per_page < 1 or per_page > MAX_PER_PAGE:
            raise SearchValidationError(
                ErrorCode.INVALID_PER_PAGE,
                "perPage",
                f"perPage must be between 1 and {MAX_PER_PAGE}",
            )


def _validate_range(field: str, range_filter: Any) -> None:
    if not isinstance(range_filter, Mapping):
        raise SearchValidationError(ErrorCode.INVALID_RANGE, field, f"{field} must be an object with min, max or exact")

    for key in RANGE_KEYS:
        value = range_filter.get(key)
        if value is not None and (not _is_integer(value) or value < 0):
            raise SearchValidationError(
                ErrorCode.INVALID_RANGE,
                f"{field}.{key}",
                f"{field}.{key} must be a non-negative integer",
            )

    minimum = range_filter.get("min")
    maximum = range_filter.get("max")
    if minimum is not None and maximum is not None and minimum > maximum:
        raise SearchValidationError(
            ErrorCode.INVALID_RANGE,
            field,
            f"{field}.min cannot be greater than {field}.max",
        )


def _validate_date_range(field: str, date_range: Any) -> None:
    if not isinstance(date_range, Mapping):
        raise SearchValidationError(
            ErrorCode.INVALID_DATE_FORMAT,
            field,
            f"{field} must be an object with from, to or exact",
        )

    for key in DATE_KEYS:
        value = date_range.get(key)
        if value is not None and not is_valid_date(value):
            raise SearchValidationError(
                ErrorCode.INVALID_DATE_FORMAT,
                f"{field}.{key}",
                f"Invalid date format for {field}.{key} (use YYYY-MM-DD)",
            )


def _with_aliases(filters: Mapping[str, Any]) -> dict[str, Any]:
    """Rename snake_case field names to the camelCase keys the rules read.

    ``SearchFilters`` accepts both spellings, so both must be checked. When a
    payload carries both, the camelCase value wins, as it does in the model.
    """
    payload = dict(filters)
    for name in SearchFilters.model_fields:
        alias = to_camel(name)
        if alias != name and name in payload:
            payload.setdefault(alias, payload.pop(name))

    created = payload.get("created")
    if isinstance(created, Mapping) and "from_" in created:
        created = dict(created)
        created.setdefault("from", created.pop("from_"))
        payload["created"] = created
    return payload


def _as_payload(filters: Mapping[str, Any] | SearchFilters) -> Mapping[str, Any]:
    if isinstance(filters, SearchFilters):
        return filters.model_dump(by_alias=True, exclude_none=True)
    return _with_aliases(filters)


def validate_search_filters(filters: Mapping[str, Any] | SearchFilters) -> None:
    """Validate search filters, raising on the first rule that fails.

    Args:
        filters: A raw payload (camelCase or snake_case keys) or an
            already-built ``SearchFilters``.

    Raises:
        SearchValidationError: With one of MISSING_QUERY, QUERY_TOO_LONG,
            INVALID_PAGE, PAGE_TOO_HIGH, INVALID_PER_PAGE, INVALID_RANGE,
            INVALID_DATE_FORMAT or INVALID_FILTER.
    """
    if not isinstance(filters, (Mapping, SearchFilters)):
        raise SearchValidationError(ErrorCode.INVALID_FILTER, "filters", "Search filters must be an object")

    payload = _as_payload(filters)
    _validate_query(payload)
    _validate_pagination(payload)

    for field in RANGE_FIELDS:
        if payload.get(field) is not None:
            _validate_range(field, payload[field])

    if payload.get("created") is not None:
        _validate_date_range("created", payload["created"])


def parse_search_filters(filters: Mapping[str, Any] | SearchFilters) -> SearchFilters:
    """Validate a payload and build the immutable ``SearchFilters`` from it.

    The built model is checked again, so whatever reaches the query builder
    has passed every rule regardless of how its keys were spelled.
    """
    validate_search_filters(filters)
    if isinstance(filters, SearchFilters):
        return filters
    try:
        search_filters = SearchFilters.model_validate(filters)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(part) for part in first_error["loc"])
        logger.debug("Search filters failed schema validation", field=field, error=first_error["msg"])
        raise SearchValidationError(
            ErrorCode.INVALID_FILTER,
            field,
            f"Invalid value for {field}: {first_error['msg']}",
        ) from e
    validate_search_filters(search_filters)
    return search_filters
