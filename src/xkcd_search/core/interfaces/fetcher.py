"""Remote comic fetcher contract.

Why Protocol:
- Structural typing: the range fetcher accepts the HTTP client or any
  instrumented/fault-injecting fake without inheritance.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from xkcd_search.core.domain.models import ComicRecord


@runtime_checkable
class ComicFetcher(Protocol):
    """Minimal contract for fetching one comic.

    Design rules:
    - `fetch` is async because it does network I/O.
    - A non-positive `num` means "the newest comic".
    - Failures are raised as `FetchError` subclasses, never returned.
    """

    async def fetch(self, num: int) -> ComicRecord:
        """Fetch the comic `num` and return its decoded metadata."""

        ...
