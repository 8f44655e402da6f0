"""Helpers for turning raw request bodies into search calls and errors into responses."""

import json
from typing import Any

import structlog

from github_user_search.exceptions import ApiError, ErrorCode

logger = structlog.get_logger(__name__)


def parse_request_body(raw_body: str | bytes) -> Any:
    """Decode a JSON request body.

    Raises:
        ApiError: INVALID_JSON (400) if the body is not valid JSON. This is
            raised before any filter validation takes place.
    """
    try:
        return json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ApiError("Invalid JSON in request body", 400, ErrorCode.INVALID_JSON) from e


def error_payload(error: BaseException, fallback_message: str = "Internal server error") -> tuple[dict[str, Any], int]:
    """Build the error body and status code returned for a failed request."""
    if isinstance(error, ApiError):
        return error.to_dict(), error.status_code
    logger.error("Unhandled error while serving request", error=str(error), error_type=type(error).__name__)
    return {"error": str(error) or fallback_message}, 500
