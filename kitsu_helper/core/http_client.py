"""HTTP transport for kitsu-helper."""

import logging

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)

# Constants
DEFAULT_TIMEOUT = 15
UA = "kitsu-helper/0.1"
JSON_API = "application/vnd.api+json"
SCHEMA = "1.0.0"


def _req(method: str, url: str, **kw) -> requests.Response:
    """Single-attempt request; network failures become TransportError."""
    timeout = kw.pop("timeout", None)
    if timeout is None:
        timeout = DEFAULT_TIMEOUT
    headers = {"User-Agent": UA, "Accept": JSON_API, **kw.pop("headers", {})}

    try:
        return requests.request(method, url, timeout=timeout, headers=headers, **kw)
    except requests.RequestException as e:
        logger.warning("%s %s failed: %s", method, url, e)
        raise TransportError(str(e)) from e


def http_get(url: str, **kw) -> requests.Response:
    return _req("GET", url, **kw)


def err_payload(source: str, code: str, message: str):
    return {"schemaVersion": SCHEMA, "error": {"code": code, "message": message, "source": source}}
