"""Shared constants used across the application."""

# GitHub Search API Constants
# ---------------------------

GITHUB_SEARCH_RESULT_LIMIT = 1000
"""GitHub Search API hard limit on results reachable through pagination."""

DEFAULT_PER_PAGE = 30
"""Page size GitHub applies when per_page is not sent."""

MAX_PER_PAGE = 100
"""Largest page size the Search API accepts."""

MAX_QUERY_LENGTH = 256
"""Maximum length of the free-text search term."""

DEFAULT_PAGE = 1

DEFAULT_SORT = "best-match"
"""Implicit Search API ranking; never sent explicitly."""

DEFAULT_SORT_ORDER = "desc"

# HTTP Constants
# --------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"

SEARCH_USERS_PATH = "/search/users"

RATE_LIMIT_PATH = "/rate_limit"

SEARCH_ACCEPT_HEADER = "application/vnd.github.v3+json"
"""Content type requested from the Search API."""

USER_AGENT = "github-user-search"

RATE_LIMIT_LIMIT_HEADER = "X-RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"
RATE_LIMIT_USED_HEADER = "X-RateLimit-Used"

# Retry Constants
# ---------------

DEFAULT_MAX_RETRIES = 3
"""Retries after the first attempt; up to four attempts in total."""

DEFAULT_BASE_DELAY_MS = 1000

DEFAULT_MAX_DELAY_MS = 10000

JITTER_RATIO = 0.2
"""Width of the random band applied to backoff delays, as a fraction of the delay."""

DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
