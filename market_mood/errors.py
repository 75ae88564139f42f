"""Failures raised while fetching headlines."""

from __future__ import annotations


class FetchError(Exception):
    """Base class for every headline fetch failure."""


class HttpStatusError(FetchError):
    """The aggregator answered with a non-2xx status."""

    def __init__(self, status: int, body: str = "") -> None:
        self.status = status
        self.body = body
        message = f"HTTP error! status: {status}"
        if body:
            message = f"{message}, message: {body}"
        super().__init__(message)


class ProtocolError(FetchError):
    """The response body could not be read as JSON (or as a feed)."""


class ApiError(FetchError):
    """The envelope was readable but signalled failure or carried no items."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
