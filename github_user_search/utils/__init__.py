"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_PER_PAGE,
    GITHUB_SEARCH_RESULT_LIMIT,
    MAX_PER_PAGE,
    MAX_QUERY_LENGTH,
)
from .log_config import configure_logging

__all__ = [
    "GITHUB_SEARCH_RESULT_LIMIT",
    "DEFAULT_PER_PAGE",
    "MAX_PER_PAGE",
    "MAX_QUERY_LENGTH",
    "configure_logging",
]
