"""Exceptions raised by the Kitsu request/response mapper."""

from typing import List, Optional


class KitsuError(Exception):
    """Base exception for every failed Kitsu call."""

    pass


class TransportError(KitsuError):
    """Raised when the request never produced a response (connection, timeout).

    The underlying exception is chained as ``__cause__``.
    """

    pass


class DecodeError(KitsuError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class ApiError(KitsuError):
    """Raised on a non-2xx status; carries the status and parsed messages."""

    def __init__(self, status: int, messages: Optional[List[str]] = None) -> None:
        self.status = status
        self.messages = list(messages or [])
        super().__init__(f"{status}: {self.message}")

    @property
    def message(self) -> str:
        if self.messages:
            return "; ".join(self.messages)
        return f"HTTP {self.status}"
