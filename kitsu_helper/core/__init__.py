"""Core functionality for kitsu-helper."""

from .builder import Search
from .errors import KitsuError, TransportError, DecodeError, ApiError
from .http_client import http_get, err_payload
from .decoders import decode_entity, decode_response, decode_errors
from .normalizers import norm_hit, norm_details
from .requester import (
    API_URL, build_url,
    search_anime, search_manga, search_users,
    get_anime, get_manga, get_user, refresh,
)

__all__ = [
    "Search",
    "KitsuError", "TransportError", "DecodeError", "ApiError",
    "http_get", "err_payload",
    "decode_entity", "decode_response", "decode_errors",
    "norm_hit", "norm_details",
    "API_URL", "build_url",
    "search_anime", "search_manga", "search_users",
    "get_anime", "get_manga", "get_user", "refresh",
]
