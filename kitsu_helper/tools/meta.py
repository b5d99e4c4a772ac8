"""Metadata tools for kitsu-helper."""

from importlib.metadata import version, PackageNotFoundError

from ..core.http_client import DEFAULT_TIMEOUT
from ..core.requester import API_URL

# Version info
try:
    __VERSION__ = version("kitsu-helper")
except PackageNotFoundError:
    __VERSION__ = "0.0.0+dev"


def health():
    """Health check endpoint."""
    return {"schemaVersion": "1.0.0", "ok": True, "sources": ["kitsu"]}


def about():
    """About information for the service."""
    return {
        "schemaVersion": "1.0.0",
        "name": "kitsu-helper",
        "version": __VERSION__,
        "endpoints": {"kitsu": API_URL},
        "limits": {"maxPerPage": 20, "timeoutSec": DEFAULT_TIMEOUT},
        "notes": [
            "No API key; read-only public endpoints.",
            "Single attempt per call, no retries.",
        ],
    }


def register_tools(mcp):
    """Register meta tools with FastMCP."""
    mcp.tool()(health)
    mcp.tool()(about)
