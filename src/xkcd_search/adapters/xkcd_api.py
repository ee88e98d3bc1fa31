"""Remote comic fetcher: the xkcd JSON API.

Endpoints:
- `<base>/info.0.json`        newest comic
- `<base>/<num>/info.0.json`  a specific comic

One GET per call, no retries. Identifier 404 is not special here: the server
answers 404 for it and that is reported like any other status.
"""

from __future__ import annotations

import logging
from types import TracebackType

import httpx
from pydantic import ValidationError

from xkcd_search.adapters.http_client import build_async_client
from xkcd_search.core.config import AppSettings
from xkcd_search.core.domain.models import ComicRecord
from xkcd_search.core.errors import DecodeError, RemoteNotFound, TransportError, UnexpectedStatus
from xkcd_search.core.interfaces.fetcher import ComicFetcher

logger = logging.getLogger(__name__)


def _describe(num: int) -> str:
    return "latest comic" if num < 1 else f"comic number {num}"


class XkcdClient(ComicFetcher):
    """Fetches comic metadata from the xkcd API.

    Used as an async context manager, every fetch shares one connection pool;
    otherwise each fetch opens (and closes) its own client.
    """

    _info_suffix = "info.0.json"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "XkcdClient":
        self._client = build_async_client(self._settings, transport=self._transport)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()

    def info_url(self, num: int) -> str:
        """URL of the JSON document for `num` (non-positive: newest comic)."""

        base = self._settings.base_url.rstrip("/")
        if num < 1:
            return f"{base}/{self._info_suffix}"
        return f"{base}/{num}/{self._info_suffix}"

    async def _get(self, url: str) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url)
        async with build_async_client(self._settings, transport=self._transport) as client:
            return await client.get(url)

    async def fetch(self, num: int) -> ComicRecord:
        url = self.info_url(num)
        logger.debug("GET %s", url)
        try:
            response = await self._get(url)
        except httpx.RequestError as exc:
            raise TransportError(f"Failed to GET from URL {url}: {exc}", num=num) from exc

        if response.status_code == 404:
            raise RemoteNotFound(
                f"Unexpected response fetching {_describe(num)}: 404",
                num=num,
                status_code=404,
            )
        if response.status_code != 200:
            raise UnexpectedStatus(
                f"Unexpected response fetching {_describe(num)}: {response.status_code}",
                num=num,
                status_code=response.status_code,
            )

        try:
            return ComicRecord.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"Invalid JSON for {_describe(num)}: {exc}", num=num) from exc

    async def fetch_latest(self) -> ComicRecord:
        return await self.fetch(0)
