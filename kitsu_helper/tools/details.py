"""Media details tools for kitsu-helper."""

from ..core import requester
from ..core.errors import KitsuError
from ..core.http_client import err_payload
from ..core.normalizers import norm_details
from ._errors import error_payload

_GETTERS = {"anime": requester.get_anime, "manga": requester.get_manga}


def media_details(id: int, kind: str = "anime"):
    """Full normalized record for one Kitsu anime or manga id."""
    kind = kind.lower()
    if kind not in _GETTERS:
        return err_payload("kitsu", "BAD_REQUEST", f"kind must be one of {sorted(_GETTERS)}")
    try:
        res = _GETTERS[kind](id)
    except KitsuError as e:
        return error_payload(e)

    det = norm_details(res["data"])
    det["schemaVersion"] = "1.0.0"
    return det


def register_tools(mcp):
    mcp.tool()(media_details)
