"""Validation of search filters before any network activity."""

from .validator import is_valid_date, max_page_for, parse_search_filters, validate_search_filters

__all__ = ["validate_search_filters", "parse_search_filters", "is_valid_date", "max_page_for"]
