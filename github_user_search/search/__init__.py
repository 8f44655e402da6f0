"""User search use cases."""

from .service import SearchUsersService, create_search_service, normalize_filters

__all__ = ["SearchUsersService", "create_search_service", "normalize_filters"]
