"""Bounded concurrent fetching of a comic range.

One task is started per identifier, but a fixed pool of permits
(`asyncio.Semaphore`) caps how many fetches are in flight at once. Every task
reports exactly one `FetchOutcome` to a shared queue; the aggregator waits for
all of them before deciding.

The batch is all-or-nothing: returning the comics that did arrive could leave
a gap in the local store that is never repaired, because the next run only
fetches above the highest stored identifier.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Collection

from xkcd_search.core.domain.models import ComicRecord
from xkcd_search.core.interfaces.fetcher import ComicFetcher

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 100

# The remote source never published comic 404.
KNOWN_ABSENT: frozenset[int] = frozenset({404})


@dataclass(frozen=True)
class RangeRequest:
    """Inclusive interval `[first, last]` of comic identifiers."""

    first: int
    last: int

    @property
    def is_empty(self) -> bool:
        return self.first > self.last

    def identifiers(self, skip: Collection[int] = KNOWN_ABSENT) -> list[int]:
        if self.is_empty:
            return []
        return [num for num in range(self.first, self.last + 1) if num not in skip]


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one fetch attempt: a comic or an error, never both."""

    num: int
    comic: ComicRecord | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def fetch_comic_range(
    fetcher: ComicFetcher,
    first: int,
    last: int,
    *,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    skip: Collection[int] = KNOWN_ABSENT,
) -> list[ComicRecord]:
    """Fetch every comic in `[first, last]` except the `skip` identifiers.

    Returns the comics sorted by identifier, or an empty list (without any
    fetch) when `first > last`. If any fetch fails, all dispatched fetches are
    still awaited and then one of the observed errors is raised; which one is
    unspecified when several fail.
    """

    if max_concurrency < 1:
        raise ValueError("max_concurrency must be >= 1")

    identifiers = RangeRequest(first, last).identifiers(skip)
    if not identifiers:
        return []

    permits = asyncio.Semaphore(max_concurrency)
    outcomes: asyncio.Queue[FetchOutcome] = asyncio.Queue()

    async def fetch_one(num: int) -> None:
        async with permits:
            try:
                comic = await fetcher.fetch(num)
            except Exception as exc:
                outcomes.put_nowait(FetchOutcome(num=num, error=exc))
            else:
                outcomes.put_nowait(FetchOutcome(num=num, comic=comic))

    logger.debug(
        "Fetching %d comics in [%d, %d] (max %d in flight)",
        len(identifiers),
        first,
        last,
        max_concurrency,
    )
    tasks = [asyncio.create_task(fetch_one(num)) for num in identifiers]

    comics: list[ComicRecord] = []
    errors: list[Exception] = []
    try:
        for _ in identifiers:
            outcome = await outcomes.get()
            if outcome.ok and outcome.comic is not None:
                comics.append(outcome.comic)
            elif outcome.error is not None:
                logger.debug("Fetch of comic %d failed: %s", outcome.num, outcome.error)
                errors.append(outcome.error)
        await asyncio.gather(*tasks)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()

    if errors:
        logger.debug("%d of %d fetches failed", len(errors), len(identifiers))
        raise errors[0]

    comics.sort(key=lambda c: c.num)
    return comics
