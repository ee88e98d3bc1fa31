"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets adapters (HTTP client, local store) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_cache_dir() -> Path:
    """Per-user cache directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("LOCALAPPDATA", str(Path.home())))
        return base / "xkcd-search"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches" / "xkcd-search"

    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg) / "xkcd-search"
    return Path.home() / ".cache" / "xkcd-search"


def get_default_store_file() -> Path:
    return get_user_cache_dir() / "store.db"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without cluttering the core.
    - A single config contract shared by the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="XKCD_SEARCH_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="https://xkcd.com",
        min_length=8,
        description="Base URL of the comic JSON API.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="xkcd-search/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    max_concurrency: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Maximum number of comic fetches in flight at once.",
    )
    cache_file: Path | None = Field(
        default=None,
        description="Local comic store (JSON lines). Defaults to the user cache dir.",
    )

    def resolved_cache_file(self) -> Path:
        return self.cache_file or get_default_store_file()
