"""Query filter builder for Kitsu search endpoints."""

from types import MappingProxyType
from typing import Dict, Mapping
from urllib.parse import urlencode, quote


class Search:
    """Accumulates search parameters; every setter returns the builder.

    Extra filters per endpoint besides each resource's own fields:

    - anime: ``season``, ``streamers``, ``text``
    - manga: ``text``
    - users: ``name``, ``query``
    """

    def __init__(self) -> None:
        self._params: Dict[str, str] = {}

    def filter(self, key: str, value: str) -> "Search":
        """Filter results by a key and value (``filter[key]=value``)."""
        self._params[f"filter[{key}]"] = value
        return self

    def limit(self, limit: int) -> "Search":
        """Page size, used together with :meth:`offset`."""
        self._params["page[limit]"] = str(limit)
        return self

    def offset(self, offset: int) -> "Search":
        """Page offset, used together with :meth:`limit`."""
        self._params["page[offset]"] = str(offset)
        return self

    def sort(self, fields: str) -> "Search":
        """Sort by fields: ``id`` ascending, ``-id`` descending, comma-joined."""
        self._params["sort"] = fields
        return self

    def params(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self._params))

    def to_query(self) -> str:
        return urlencode(self._params, quote_via=quote, safe="")

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"Search({self._params!r})"
