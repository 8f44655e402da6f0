"""Encoders for individual Search API qualifier clauses."""

from github_user_search.schemas.filters import DateRangeFilter, RangeFilter


def escape_qualifier_value(value: str) -> str:
    """Quote a qualifier value when it contains a space.

    Example:
        escape_qualifier_value("Seoul")          # Seoul
        escape_qualifier_value("San Francisco")  # "San Francisco"
    """
    if " " in value:
        return f'"{value}"'
    return value


def build_range_clause(field: str, range_filter: RangeFilter) -> str | None:
    """Encode a numeric range as a qualifier.

    Example:
        build_range_clause("repos", RangeFilter(exact=42))         # repos:42
        build_range_clause("repos", RangeFilter(min=10, max=50))   # repos:10..50
        build_range_clause("repos", RangeFilter(min=10))           # repos:>=10
        build_range_clause("repos", RangeFilter(max=100))          # repos:<=100
    """
    if range_filter.exact is not None:
        return f"{field}:{range_filter.exact}"
    if range_filter.min is not None and range_filter.max is not None:
        return f"{field}:{range_filter.min}..{range_filter.max}"
    if range_filter.min is not None:
        return f"{field}:>={range_filter.min}"
    if range_filter.max is not None:
        return f"{field}:<={range_filter.max}"
    return None


def build_date_range_clause(field: str, date_range: DateRangeFilter) -> str | None:
    """Encode a date range as a qualifier, with the same precedence as numeric ranges."""
    if date_range.exact:
        return f"{field}:{date_range.exact}"
    if date_range.from_ and date_range.to:
        return f"{field}:{date_range.from_}..{date_range.to}"
    if date_range.from_:
        return f"{field}:>={date_range.from_}"
    if date_range.to:
        return f"{field}:<={date_range.to}"
    return None
