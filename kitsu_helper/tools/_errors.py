"""Map core exceptions to tool error payloads."""

from ..core.errors import KitsuError, DecodeError, ApiError
from ..core.http_client import err_payload


def error_payload(e: KitsuError):
    if isinstance(e, ApiError):
        return err_payload("kitsu", f"UPSTREAM_{e.status}", e.message)
    if isinstance(e, DecodeError):
        return err_payload("kitsu", "DECODE", str(e))
    return err_payload("kitsu", "TRANSPORT", str(e))
