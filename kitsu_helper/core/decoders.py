"""Decoding of Kitsu JSON:API documents.

Shape checking is done by the strict pydantic models in ``models.types``;
this module turns their validation errors into :class:`DecodeError` with a
JSON path such as ``data[0].attributes.canonicalTitle``. Values are passed
through untouched and absent optional fields come back as ``None``.
"""

from typing import Any, Dict, List, Sequence, Union

from pydantic import ValidationError

from .errors import DecodeError
from ..models.types import Anime, Manga, User, Document, Response

# resource path -> entity model
RESOURCES = {"anime": Anime, "manga": Manga, "users": User}

_SINGLE = {kind: Document[model] for kind, model in RESOURCES.items()}
_MANY = {kind: Document[List[model]] for kind, model in RESOURCES.items()}

_TYPE_NAMES = {dict: "object", list: "array", str: "string", bool: "boolean",
               int: "number", float: "number"}


def _json_name(v: Any) -> str:
    if v is None:
        return "null"
    return _TYPE_NAMES.get(type(v), type(v).__name__)


def _path(loc: Sequence[Union[str, int]], root: str = "") -> str:
    path = root
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else part
    return path or "$"


def _decode_error(e: ValidationError, root: str = "") -> DecodeError:
    err = e.errors()[0]
    if err["type"] == "missing":
        msg = "missing required field"
    else:
        msg = f"{err['msg']}, got {_json_name(err.get('input'))}"
    return DecodeError(msg, _path(err["loc"], root))


def decode_entity(obj: Any, kind: str, path: str = "data") -> Dict[str, Any]:
    """Decode one resource object of ``kind`` (``anime``, ``manga``, ``users``)."""
    try:
        return RESOURCES[kind].model_validate(obj).model_dump()
    except ValidationError as e:
        raise _decode_error(e, path) from e


def decode_response(payload: Any, kind: str, many: bool = False) -> Response:
    """Decode a whole document: ``data`` holds one entity, or a list when ``many``."""
    model = _MANY[kind] if many else _SINGLE[kind]
    try:
        return model.model_validate(payload).model_dump()
    except ValidationError as e:
        raise _decode_error(e) from e


def decode_errors(payload: Any) -> List[str]:
    """Messages from a JSON:API ``errors`` document; empty when there are none."""
    if not isinstance(payload, dict) or not isinstance(payload.get("errors"), list):
        return []
    out: List[str] = []
    for e in payload["errors"]:
        if not isinstance(e, dict):
            continue
        msg = e.get("title") or e.get("detail")
        if isinstance(msg, str) and msg:
            out.append(msg)
    return out
