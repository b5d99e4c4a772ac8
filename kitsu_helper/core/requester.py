"""Request/response mapper for the Kitsu API.

One function per resource category. Each call builds its own URL (and its
own :class:`Search` for searches), makes exactly one transport call, and
either returns a decoded :class:`Response` or raises one of
:class:`TransportError`, :class:`ApiError`, :class:`DecodeError`.
"""

import logging
import os
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

from .builder import Search
from .decoders import decode_response, decode_errors
from .errors import ApiError, DecodeError, TransportError
from .http_client import http_get
from ..models.types import Response

logger = logging.getLogger(__name__)

API_URL = os.getenv("KITSU_API_URL", "https://kitsu.io/api/edge")

Configure = Callable[[Search], Optional[Search]]
Transport = Callable[..., Any]


def build_url(path: str, search: Optional[Search] = None, base: Optional[str] = None) -> str:
    url = f"{(base or API_URL).rstrip('/')}/{path}"
    query = search.to_query() if search is not None else ""
    return f"{url}?{query}" if query else url


def _body(r: Any) -> Any:
    try:
        return r.json()
    except ValueError as e:
        raise DecodeError(f"invalid JSON body: {e}") from e


def _fetch(url: str, kind: str, many: bool, transport: Optional[Transport], timeout: Optional[float]) -> Response:
    send = transport or http_get
    logger.debug("GET %s", url)
    try:
        r = send(url, timeout=timeout)
    except OSError as e:
        # RequestException subclasses OSError
        raise TransportError(str(e)) from e

    status = r.status_code
    if not 200 <= status < 300:
        try:
            messages = decode_errors(r.json())
        except ValueError:
            messages = []
        err = ApiError(status, messages)
        logger.warning("GET %s -> %s", url, err)
        raise err

    try:
        return decode_response(_body(r), kind, many=many)
    except DecodeError as e:
        logger.warning("GET %s: undecodable body (%s)", url, e)
        raise


def _search(kind: str, configure: Optional[Configure], transport, timeout) -> Response:
    search = Search()
    if configure is not None:
        configure(search)
    return _fetch(build_url(kind, search), kind, True, transport, timeout)


def _get(kind: str, id: Any, transport, timeout) -> Response:
    # one path segment, whatever the caller passed
    return _fetch(build_url(f"{kind}/{quote(str(id), safe='')}"), kind, False, transport, timeout)


def search_anime(configure: Optional[Configure] = None, transport: Optional[Transport] = None,
                 timeout: Optional[float] = None) -> Response:
    """Search anime, e.g. ``search_anime(lambda f: f.filter("text", "non non biyori"))``."""
    return _search("anime", configure, transport, timeout)


def search_manga(configure: Optional[Configure] = None, transport: Optional[Transport] = None,
                 timeout: Optional[float] = None) -> Response:
    return _search("manga", configure, transport, timeout)


def search_users(configure: Optional[Configure] = None, transport: Optional[Transport] = None,
                 timeout: Optional[float] = None) -> Response:
    return _search("users", configure, transport, timeout)


def get_anime(id: Any, transport: Optional[Transport] = None, timeout: Optional[float] = None) -> Response:
    return _get("anime", id, transport, timeout)


def get_manga(id: Any, transport: Optional[Transport] = None, timeout: Optional[float] = None) -> Response:
    return _get("manga", id, transport, timeout)


def get_user(id: Any, transport: Optional[Transport] = None, timeout: Optional[float] = None) -> Response:
    return _get("users", id, transport, timeout)


def refresh(entity: Dict[str, Any], transport: Optional[Transport] = None,
            timeout: Optional[float] = None) -> Response:
    """Fetch a fresh copy of an already decoded anime, manga or user."""
    return _get(entity["type"], entity["id"], transport, timeout)
