"""Command-line entry point.

    xkcd-search [OPTIONS] KEYWORDS...

Prints one `<safe title>: <permanent URL>` line per matching comic.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from xkcd_search.cli.ui_components import configure_logging, format_comic_line
from xkcd_search.core.config import AppSettings
from xkcd_search.core.domain.options import MatchMode, MatchScope
from xkcd_search.core.errors import StoreError
from xkcd_search.core.services.search_pipeline import SearchRequest, search

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True},
    help="Search xkcd comics (title, alt-text, transcript) for keywords.",
)

_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _no_arguments_given(ctx: typer.Context) -> bool:
    for name in ctx.params:
        source = ctx.get_parameter_source(name)
        if source is not None and source.name != "DEFAULT":
            return False
    return True


def _resolve_scope(title: bool, alt_text: bool) -> MatchScope:
    if title and alt_text:
        raise typer.BadParameter("--title and --alt-text are mutually exclusive")
    if title:
        return MatchScope.TITLE
    if alt_text:
        return MatchScope.ALT_TEXT
    return MatchScope.ALL


@app.command()
def main(
    ctx: typer.Context,
    keywords: Optional[list[str]] = typer.Argument(
        None,
        help="Keywords to look for (case-insensitive substrings). Keywords starting with '-' may also follow '--'.",
        show_default=False,
    ),
    match_any: bool = typer.Option(
        False,
        "--any/--all",
        help="Match comics containing any of the keywords instead of all of them.",
    ),
    title: bool = typer.Option(False, "--title", help="Only search a comic's title."),
    alt_text: bool = typer.Option(False, "--alt-text", help="Only search a comic's alt-text."),
    local: bool = typer.Option(
        False,
        "--local",
        help="Only search the local database, don't connect to the server.",
    ),
    cache_file: Optional[Path] = typer.Option(
        None,
        "--cache-file",
        dir_okay=False,
        help="Local comic store to use instead of the default one.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Search xkcd comics for KEYWORDS."""

    if not keywords and _no_arguments_given(ctx):
        _console.print("No arguments given.", style="red", markup=False)
        raise typer.Exit(code=1)

    configure_logging(_console, verbose=verbose)

    settings = AppSettings()
    if cache_file is not None:
        settings = settings.model_copy(update={"cache_file": cache_file})

    request = SearchRequest(
        keywords=list(keywords or []),
        mode=MatchMode.from_bool(match_any),
        scope=_resolve_scope(title, alt_text),
        remote=not local,
    )
    logger.debug(
        "Searching %s for %s keywords %s",
        request.scope.label(),
        request.mode.value,
        request.keywords,
    )

    try:
        matched, _ = asyncio.run(search(settings=settings, request=request))
    except StoreError as exc:
        _console.print(f"Error: {exc}", style="red", markup=False)
        raise typer.Exit(code=1) from exc

    for comic in matched:
        typer.echo(format_comic_line(comic))


def run() -> None:
    app()
