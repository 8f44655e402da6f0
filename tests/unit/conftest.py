"""Fixtures for unit tests."""

from typing import Any, Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def rate_limit_body() -> dict[str, Any]:
    """A ``/rate_limit`` response body."""
    return {
        "resources": {
            "core": {"limit": 5000, "remaining": 4999, "reset": 1700003600, "used": 1},
            "search": {"limit": 30, "remaining": 12, "reset": 1700000060, "used": 18},
            "graphql": {"limit": 5000, "remaining": 5000, "reset": 1700003600, "used": 0},
        },
        "rate": {"limit": 5000, "remaining": 4999, "reset": 1700003600, "used": 1},
    }
