"""Translates structured search filters into GitHub Search API parameters."""

from github_user_search.query.clauses import build_date_range_clause, build_range_clause, escape_qualifier_value
from github_user_search.schemas.filters import SearchFilters, SearchQuery
from github_user_search.utils.constants import DEFAULT_SORT


def build_query_string(filters: SearchFilters) -> str:
    """Assemble the ``q`` parameter from the filters.

    Clauses are emitted in a fixed order and absent filters are skipped:
    free-text term, type, in:, repos, location, language, created,
    followers, is:sponsorable. The free-text term is passed through verbatim.
    """
    parts: list[str] = []

    if filters.query:
        parts.append(filters.query)

    if filters.type:
        parts.append(f"type:{filters.type}")

    if filters.search_in:
        parts.extend(f"in:{field}" for field in filters.search_in)

    if filters.repos is not None:
        repos_clause = build_range_clause("repos", filters.repos)
        if repos_clause:
            parts.append(repos_clause)

    if filters.location:
        parts.append(f"location:{escape_qualifier_value(filters.location)}")

    if filters.language:
        parts.append(f"language:{escape_qualifier_value(filters.language)}")

    if filters.created is not None:
        created_clause = build_date_range_clause("created", filters.created)
        if created_clause:
            parts.append(created_clause)

    if filters.followers is not None:
        followers_clause = build_range_clause("followers", filters.followers)
        if followers_clause:
            parts.append(followers_clause)

    # Only an explicit True opts in; False and None both emit nothing.
    if filters.is_sponsored is True:
        parts.append("is:sponsorable")

    return " ".join(parts)


def build_search_query(filters: SearchFilters) -> SearchQuery:
    """Build Search API request parameters from filters.

    Pure and deterministic. ``page`` and ``per_page`` are passed through
    untouched, so defaults are the caller's responsibility. ``sort`` is dropped
    for "best-match" since that is the API's implicit ranking.

    Example:
        build_search_query(SearchFilters(query="developer", type="user", location="Seoul", repos=RangeFilter(min=5)))
        # SearchQuery(q="developer type:user repos:>=5 location:Seoul")
    """
    return SearchQuery(
        q=build_query_string(filters),
        sort=filters.sort if filters.sort != DEFAULT_SORT else None,
        order=filters.sort_order,
        page=filters.page,
        per_page=filters.per_page,
    )
