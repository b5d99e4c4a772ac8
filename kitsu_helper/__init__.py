"""kitsu-helper package.

Thin client for the Kitsu anime/manga catalog API, plus the FastMCP app
factory `create_app` exposing it as tools.
"""
from .core import (
    Search,
    KitsuError, TransportError, DecodeError, ApiError,
    search_anime, search_manga, search_users,
    get_anime, get_manga, get_user, refresh,
)

from .server import create_app


__all__ = [
    "create_app", "Search",
    "KitsuError", "TransportError", "DecodeError", "ApiError",
    "search_anime", "search_manga", "search_users",
    "get_anime", "get_manga", "get_user", "refresh",
]
