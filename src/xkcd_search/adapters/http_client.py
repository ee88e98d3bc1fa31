"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and pool limits for every request to the comic API.
- Eases testing: a `transport` (e.g. `httpx.MockTransport`) can be injected.
"""

from __future__ import annotations

import httpx

from xkcd_search.core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so every fetch behaves the same.
    - The connection pool is sized to `max_concurrency`, so the pool never
      caps the number of fetches in flight below the configured limit.
    - No retries: a failed request is reported to the caller as is.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        limits=httpx.Limits(
            max_connections=settings.max_concurrency,
            max_keepalive_connections=min(20, settings.max_concurrency),
        ),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
