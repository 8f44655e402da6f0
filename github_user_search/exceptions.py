"""Contains the exception hierarchy surfaced to callers of the search service."""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable, machine-readable error codes."""

    # Pre-flight validation
    MISSING_QUERY = "MISSING_QUERY"
    QUERY_TOO_LONG = "QUERY_TOO_LONG"
    INVALID_PAGE = "INVALID_PAGE"
    PAGE_TOO_HIGH = "PAGE_TOO_HIGH"
    INVALID_PER_PAGE = "INVALID_PER_PAGE"
    INVALID_RANGE = "INVALID_RANGE"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    INVALID_FILTER = "INVALID_FILTER"
    INVALID_JSON = "INVALID_JSON"

    # Upstream failures
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    GITHUB_API_ERROR = "GITHUB_API_ERROR"
    FETCH_ERROR = "FETCH_ERROR"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    REQUEST_CANCELLED = "REQUEST_CANCELLED"

    # Configuration
    MISSING_ENV_VAR = "MISSING_ENV_VAR"


class ApiError(Exception):
    """Base error carrying a status-like severity and a stable code."""

    def __init__(self, message: str, status_code: int = 500, code: ErrorCode | None = None) -> None:
        """Initializes the error with a message, status code and error code."""
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    def to_dict(self) -> dict[str, str | None]:
        """Returns the error in the shape sent back to callers."""
        return {"error": self.message, "code": self.code.value if self.code else None}


class SearchValidationError(ApiError):
    """Raised when search filters fail validation before any network call."""

    def __init__(self, code: ErrorCode, field: str, message: str) -> None:
        """Initializes the validation error with the offending field."""
        super().__init__(message, status_code=400, code=code)
        self.field = field


class GitHubApiError(ApiError):
    """Raised when the GitHub API returns a failure or cannot be reached."""

    pass


class RequestCancelledError(ApiError):
    """Raised when the caller cancels a request before it completes."""

    def __init__(self, message: str = "Request was cancelled") -> None:
        """Initializes the cancellation error."""
        super().__init__(message, status_code=499, code=ErrorCode.REQUEST_CANCELLED)
