"""Search orchestration.

The CLI delegates everything but printing to these helpers: loading the
local store, refreshing it from the remote API, and filtering. Remote
failures are downgraded to warnings (the search proceeds with local data);
store failures propagate.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from xkcd_search.adapters.storage import JsonLinesStore
from xkcd_search.adapters.xkcd_api import XkcdClient
from xkcd_search.core.config import AppSettings
from xkcd_search.core.domain.models import ComicRecord
from xkcd_search.core.domain.options import MatchMode, MatchScope
from xkcd_search.core.errors import FetchError
from xkcd_search.core.interfaces.fetcher import ComicFetcher
from xkcd_search.core.interfaces.store import ComicStore
from xkcd_search.core.services.matcher import filter_comics
from xkcd_search.core.services.range_fetcher import fetch_comic_range

logger = logging.getLogger(__name__)


@dataclass
class SearchRequest:
    """Parameters that control a search."""

    keywords: Sequence[str] = ()
    mode: MatchMode = MatchMode.ALL
    scope: MatchScope = MatchScope.ALL
    remote: bool = True


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    warning: Callable[[str], None] | None = None


@dataclass
class PipelineResult:
    """Output of a pipeline invocation."""

    comics: list[ComicRecord]
    new_comics: list[ComicRecord] = field(default_factory=list)
    latest_num: int | None = None
    warnings: list[str] = field(default_factory=list)


async def get_comics(
    *,
    settings: AppSettings,
    store: ComicStore,
    fetcher: ComicFetcher,
    remote: bool = True,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    """Return every known comic, refreshing the store from the API if `remote`."""

    hooks = hooks or PipelineHooks()
    warnings: list[str] = []

    def warn(message: str, exc: Exception) -> None:
        text = f"{message} Proceeding with local data only. Error was: {exc}"
        logger.warning(text)
        warnings.append(text)
        if hooks.warning:
            hooks.warning(text)

    if not remote:
        comics, _ = await asyncio.to_thread(store.load_all)
        return PipelineResult(comics=comics)

    # The newest comic is requested while the store loads.
    latest_task = asyncio.create_task(fetcher.fetch(0))
    try:
        comics, last_stored = await asyncio.to_thread(store.load_all)
    except BaseException:
        latest_task.cancel()
        await asyncio.gather(latest_task, return_exceptions=True)
        raise

    try:
        latest = await latest_task
    except FetchError as exc:
        warn("Failed to determine number of latest comic.", exc)
        return PipelineResult(comics=comics, warnings=warnings)

    logger.debug("Latest comic: %d, highest stored: %d", latest.num, last_stored)
    try:
        new_comics = await fetch_comic_range(
            fetcher,
            last_stored + 1,
            latest.num,
            max_concurrency=settings.max_concurrency,
        )
    except FetchError as exc:
        warn("Failed to fetch all new comics.", exc)
        return PipelineResult(comics=comics, latest_num=latest.num, warnings=warnings)

    if new_comics:
        await asyncio.to_thread(store.store, new_comics)
        logger.info("Stored %d new comics", len(new_comics))

    return PipelineResult(
        comics=comics + new_comics,
        new_comics=new_comics,
        latest_num=latest.num,
        warnings=warnings,
    )


async def search(
    *,
    settings: AppSettings,
    request: SearchRequest,
    store: ComicStore | None = None,
    fetcher: ComicFetcher | None = None,
    hooks: PipelineHooks | None = None,
) -> tuple[list[ComicRecord], PipelineResult]:
    """Load/refresh comics and return the ones matching `request`, in identifier order."""

    store = store or JsonLinesStore(settings.resolved_cache_file())
    if fetcher is None:
        async with XkcdClient(settings) as client:
            result = await get_comics(
                settings=settings, store=store, fetcher=client, remote=request.remote, hooks=hooks
            )
    else:
        result = await get_comics(
            settings=settings, store=store, fetcher=fetcher, remote=request.remote, hooks=hooks
        )

    matched = filter_comics(result.comics, request.keywords, mode=request.mode, scope=request.scope)
    return matched, result
