"""CLI presentation helpers (Rich).

Why separate:
- Keeps command logic free of formatting and logging setup details.
- Search results are plain lines on stdout; diagnostics go through Rich on stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from xkcd_search.core.domain.models import ComicRecord


def configure_logging(console: Console, *, verbose: bool = False) -> None:
    """Route log records to `console` (stderr) through a `RichHandler`."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                show_path=verbose,
                rich_tracebacks=True,
                markup=False,
            )
        ],
        force=True,
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def format_comic_line(comic: ComicRecord) -> str:
    return f"{comic.safe_title}: {comic.url}"
