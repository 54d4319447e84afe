"""API endpoint package - export only."""

from .routes import health_router, search_router, get_search_service

__all__ = ["health_router", "search_router", "get_search_service"]
