"""Unit tests for search filter validation."""

from typing import Any

import pytest

from github_user_search.exceptions import ErrorCode, SearchValidationError
from github_user_search.schemas.filters import RangeFilter, SearchFilters
from github_user_search.validation.validator import (
    is_valid_date,
    max_page_for,
    parse_search_filters,
    validate_search_filters,
)


def _assert_invalid(filters: Any, code: ErrorCode, field: str | None = None) -> SearchValidationError:
    with pytest.raises(SearchValidationError) as exc_info:
        validate_search_filters(filters)
    assert exc_info.value.code == code
    assert exc_info.value.status_code == 400
    if field is not None:
        assert exc_info.value.field == field
    return exc_info.value


def test_minimal_filters_are_valid() -> None:
    """A bare query passes every rule."""
    validate_search_filters({"query": "octocat"})


@pytest.mark.parametrize(
    "filters",
    [
        pytest.param({}, id="missing"),
        pytest.param({"query": ""}, id="empty"),
        pytest.param({"query": "   \t"}, id="whitespace only"),
        pytest.param({"query": 42}, id="not a string"),
    ],
)
def test_missing_query(filters: dict[str, Any]) -> None:
    """Absent, empty and whitespace-only queries are rejected."""
    _assert_invalid(filters, ErrorCode.MISSING_QUERY, "query")


def test_query_length_boundary() -> None:
    """256 characters are allowed, 257 are not."""
    validate_search_filters({"query": "a" * 256})
    error = _assert_invalid({"query": "a" * 257}, ErrorCode.QUERY_TOO_LONG, "query")
    assert "256" in error.message


@pytest.mark.parametrize("page", [0, -1, 1.5, "2", True])
def test_invalid_page(page: Any) -> None:
    """Pages must be positive integers; bools and numeric strings are rejected."""
    _assert_invalid({"query": "x", "page": page}, ErrorCode.INVALID_PAGE, "page")


def test_integral_float_page_is_accepted() -> None:
    """A float with no fractional part counts as an integer."""
    validate_search_filters({"query": "x", "page": 2.0})


def test_page_ceiling_with_default_per_page() -> None:
    """With 30 results per page the last reachable page is 33."""
    validate_search_filters({"query": "x", "page": 33, "perPage": 30})
    error = _assert_invalid({"query": "x", "page": 34, "perPage": 30}, ErrorCode.PAGE_TOO_HIGH, "page")
    assert "max 33" in error.message


def test_page_ceiling_without_per_page_uses_default() -> None:
    """A missing perPage is treated as 30 for the ceiling."""
    _assert_invalid({"query": "x", "page": 34}, ErrorCode.PAGE_TOO_HIGH)


def test_page_ceiling_scales_with_per_page() -> None:
    """With 100 results per page only ten pages are reachable."""
    validate_search_filters({"query": "x", "page": 10, "perPage": 100})
    _assert_invalid({"query": "x", "page": 11, "perPage": 100}, ErrorCode.PAGE_TOO_HIGH)


@pytest.mark.parametrize("per_page", [0, 101, -5, 2.5, "10", False])
def test_invalid_per_page(per_page: Any) -> None:
    """perPage must be an integer between 1 and 100."""
    _assert_invalid({"query": "x", "perPage": per_page}, ErrorCode.INVALID_PER_PAGE, "perPage")


@pytest.mark.parametrize("per_page", [1, 100])
def test_per_page_boundaries_are_valid(per_page: int) -> None:
    """1 and 100 are inclusive bounds."""
    validate_search_filters({"query": "x", "perPage": per_page})


def test_page_is_checked_before_per_page() -> None:
    """When both are wrong the page error is reported first."""
    _assert_invalid({"query": "x", "page": 0, "perPage": 500}, ErrorCode.INVALID_PAGE)


@pytest.mark.parametrize(
    "range_filter,field",
    [
        pytest.param({"min": -1}, "repos.min", id="negative min"),
        pytest.param({"max": 1.5}, "repos.max", id="fractional max"),
        pytest.param({"exact": "3"}, "repos.exact", id="string exact"),
        pytest.param({"min": 10, "max": 5}, "repos", id="min above max"),
        pytest.param(7, "repos", id="not an object"),
    ],
)
def test_invalid_repos_range(range_filter: Any, field: str) -> None:
    """Repository ranges need non-negative integer bounds with min <= max."""
    _assert_invalid({"query": "x", "repos": range_filter}, ErrorCode.INVALID_RANGE, field)


def test_invalid_followers_range() -> None:
    """Follower ranges follow the same rules as repository ranges."""
    _assert_invalid({"query": "x", "followers": {"min": 500, "max": 50}}, ErrorCode.INVALID_RANGE, "followers")


def test_equal_range_bounds_are_valid() -> None:
    """min == max is allowed."""
    validate_search_filters({"query": "x", "repos": {"min": 5, "max": 5}, "followers": {"exact": 0}})


@pytest.mark.parametrize(
    "created,field",
    [
        pytest.param({"from": "2020/01/01"}, "created.from", id="wrong separator"),
        pytest.param({"to": "2023-02-30"}, "created.to", id="impossible day"),
        pytest.param({"exact": "20-01-01"}, "created.exact", id="short year"),
        pytest.param({"from": 20200101}, "created.from", id="not a string"),
    ],
)
def test_invalid_date_format(created: dict[str, Any], field: str) -> None:
    """Dates must be real calendar dates written as YYYY-MM-DD."""
    _assert_invalid({"query": "x", "created": created}, ErrorCode.INVALID_DATE_FORMAT, field)


def test_inverted_date_range_is_passed_through() -> None:
    """Date order is not checked; well-formed dates are left for GitHub to interpret."""
    validate_search_filters({"query": "x", "created": {"from": "2024-01-01", "to": "2023-01-01"}})


@pytest.mark.parametrize(
    "filters,code,field",
    [
        pytest.param({"query": "x", "per_page": 500}, ErrorCode.INVALID_PER_PAGE, "perPage", id="per_page too large"),
        pytest.param({"query": "x", "per_page": -5}, ErrorCode.INVALID_PER_PAGE, "perPage", id="per_page negative"),
        pytest.param({"query": "x", "per_page": True}, ErrorCode.INVALID_PER_PAGE, "perPage", id="per_page bool"),
        pytest.param({"query": "x", "page": 20, "per_page": 100}, ErrorCode.PAGE_TOO_HIGH, "page", id="page past ceiling"),
        pytest.param({"query": "x", "created": {"from_": "not-a-date"}}, ErrorCode.INVALID_DATE_FORMAT, "created.from", id="from_ malformed"),
    ],
)
def test_snake_case_keys_are_validated(filters: dict[str, Any], code: ErrorCode, field: str) -> None:
    """Field names accepted by the model are held to the same rules as camelCase keys."""
    _assert_invalid(filters, code, field)

    with pytest.raises(SearchValidationError) as exc_info:
        parse_search_filters(filters)
    assert exc_info.value.code == code


def test_snake_case_keys_build_model() -> None:
    """Valid snake_case payloads build the same filters as camelCase ones."""
    filters = parse_search_filters({"query": "x", "per_page": 50, "search_in": ["login"], "created": {"from_": "2020-01-01"}})
    assert filters.per_page == 50
    assert filters.search_in == ["login"]
    assert filters.created is not None
    assert filters.created.from_ == "2020-01-01"


def test_leap_day_is_valid() -> None:
    """February 29th is accepted in leap years only."""
    assert is_valid_date("2024-02-29")
    assert not is_valid_date("2023-02-29")


@pytest.mark.parametrize("filters", [None, "query=x", ["x"], 5])
def test_non_object_filters(filters: Any) -> None:
    """Anything other than an object is rejected up front."""
    _assert_invalid(filters, ErrorCode.INVALID_FILTER, "filters")


def test_search_filters_model_is_validated() -> None:
    """A built SearchFilters is checked with the same rules as a raw payload."""
    _assert_invalid(SearchFilters(query="x", repos=RangeFilter(min=9, max=1)), ErrorCode.INVALID_RANGE, "repos")


@pytest.mark.parametrize(
    "per_page,expected",
    [(30, 33), (100, 10), (1, 1000), (7, 142), (None, 33), (0, 33)],
)
def test_max_page_for(per_page: Any, expected: int) -> None:
    """The reachable page ceiling is floor(1000 / perPage)."""
    assert max_page_for(per_page) == expected


def test_parse_search_filters_builds_model() -> None:
    """A valid camelCase payload becomes an immutable SearchFilters."""
    filters = parse_search_filters(
        {
            "query": "developer",
            "searchIn": ["login"],
            "created": {"from": "2020-01-01"},
            "isSponsored": True,
            "perPage": 50,
        }
    )
    assert filters.query == "developer"
    assert filters.search_in == ["login"]
    assert filters.created is not None
    assert filters.created.from_ == "2020-01-01"
    assert filters.is_sponsored is True
    assert filters.per_page == 50


def test_parse_search_filters_rejects_unknown_enum_value() -> None:
    """Values outside the allowed vocabulary surface as INVALID_FILTER."""
    with pytest.raises(SearchValidationError) as exc_info:
        parse_search_filters({"query": "x", "type": "bot"})
    assert exc_info.value.code == ErrorCode.INVALID_FILTER
    assert exc_info.value.field == "type"
