"""Error taxonomy shared by the core and the adapters.

Remote failures (`FetchError` and subclasses) are recoverable at the pipeline
level: the search degrades to local data. `StoreError` is fatal, there is
nothing to search without a data source.
"""

from __future__ import annotations


class XkcdSearchError(Exception):
    """Base class for every error raised by xkcd-search."""


class FetchError(XkcdSearchError):
    """A single comic could not be fetched from the remote API."""

    def __init__(self, message: str, *, num: int | None = None) -> None:
        super().__init__(message)
        self.num = num


class TransportError(FetchError):
    """The HTTP request itself could not be completed (DNS, connection, timeout)."""


class UnexpectedStatus(FetchError):
    """The server answered with a non-success status code."""

    def __init__(self, message: str, *, num: int | None = None, status_code: int) -> None:
        super().__init__(message, num=num)
        self.status_code = status_code


class RemoteNotFound(UnexpectedStatus):
    """The server answered 404 for the requested comic."""


class DecodeError(FetchError):
    """The response body is not a valid comic JSON document."""


class StoreError(XkcdSearchError):
    """The local comic store could not be read or written."""
