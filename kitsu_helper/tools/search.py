"""Search tools for kitsu-helper."""

from ..core import requester
from ..core.errors import KitsuError
from ..core.http_client import err_payload
from ..core.normalizers import norm_hit
from ._errors import error_payload

_SEARCHES = {"anime": requester.search_anime, "manga": requester.search_manga}


def search_media(query: str, kind: str = "anime", limit: int = 5):
    """
    Search Kitsu for ANIME or MANGA by free text.
    limit is clamped to 1..20 (Kitsu's page size cap).
    """
    kind = kind.lower()
    if kind not in _SEARCHES:
        return err_payload("kitsu", "BAD_REQUEST", f"kind must be one of {sorted(_SEARCHES)}")
    limit = min(max(limit, 1), 20)

    try:
        res = _SEARCHES[kind](lambda f: f.filter("text", query).limit(limit))
    except KitsuError as e:
        return error_payload(e)

    return {
        "schemaVersion": "1.0.0",
        "query": query,
        "kind": kind,
        "source": "kitsu",
        "results": [norm_hit(e) for e in res["data"]],
    }


def register_tools(mcp):
    """Register search-related tools with FastMCP."""
    mcp.tool()(search_media)
