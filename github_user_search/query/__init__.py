"""Search API query construction."""

from .builder import build_query_string, build_search_query
from .clauses import build_date_range_clause, build_range_clause, escape_qualifier_value

__all__ = [
    "build_search_query",
    "build_query_string",
    "build_range_clause",
    "build_date_range_clause",
    "escape_qualifier_value",
]
