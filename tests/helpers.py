"""Test doubles and factories shared by the test modules."""

from __future__ import annotations

import asyncio

from xkcd_search.core.domain.models import ComicRecord
from xkcd_search.core.errors import RemoteNotFound, TransportError


def make_comic(num: int, **fields: str) -> ComicRecord:
    data = {
        "num": num,
        "title": f"Comic {num}",
        "safe_title": f"Comic {num}",
        "alt": "",
        "transcript": "",
        "img": f"https://imgs.xkcd.com/comics/comic_{num}.png",
        "day": "1",
        "month": "1",
        "year": "2020",
    }
    data.update(fields)
    return ComicRecord.model_validate(data)


class FakeFetcher:
    """In-memory fetcher: `latest` is the newest comic; `missing` answer 404."""

    def __init__(
        self,
        latest: int,
        *,
        missing: set[int] | None = None,
        failing: set[int] | None = None,
        delay: float = 0.0,
    ) -> None:
        self.latest = latest
        self.missing = missing or set()
        self.failing = failing or set()
        self.delay = delay
        self.calls: list[int] = []
        self.active = 0
        self.max_active = 0

    async def fetch(self, num: int) -> ComicRecord:
        self.calls.append(num)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            else:
                await asyncio.sleep(0)
            if num < 1:
                num = self.latest
            if num in self.failing:
                raise TransportError(f"connection refused for {num}", num=num)
            if num in self.missing or num > self.latest:
                raise RemoteNotFound(f"Unexpected response fetching comic number {num}: 404", num=num, status_code=404)
            return make_comic(num)
        finally:
            self.active -= 1


