"""MCP tools for kitsu-helper."""

from . import search
from . import details
from . import meta

__all__ = [
    "search",
    "details",
    "meta",
]
