"""Local comic store (JSON lines).

Why JSON lines:
- Appending new comics never rewrites what is already stored.
- No header or index: the highest stored identifier is recomputed on load.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from xkcd_search.core.domain.models import ComicRecord
from xkcd_search.core.errors import StoreError
from xkcd_search.core.interfaces.store import ComicStore

logger = logging.getLogger(__name__)


class JsonLinesStore(ComicStore):
    """One JSON object per line, appended to a single file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_file(self) -> None:
        try:
            self._path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            self._path.touch(mode=0o640, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"Cannot open store {self._path}: {exc}") from exc

    def load_all(self) -> tuple[list[ComicRecord], int]:
        self._ensure_file()
        try:
            lines = self._path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreError(f"Cannot read store {self._path}: {exc}") from exc

        stored: list[ComicRecord] = []
        highest = 0
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                comic = ComicRecord.model_validate_json(line)
            except ValidationError as exc:
                raise StoreError(f"Corrupt record in {self._path} (line {lineno}): {exc}") from exc
            highest = max(highest, comic.num)
            stored.append(comic)

        stored.sort(key=lambda c: c.num)
        logger.debug("Loaded %d comics from %s (highest: %d)", len(stored), self._path, highest)
        return stored, highest

    def store(self, comics: Iterable[ComicRecord]) -> None:
        self._ensure_file()
        payload = "".join(comic.model_dump_json() + "\n" for comic in comics)
        if not payload:
            return
        try:
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(payload)
        except OSError as exc:
            raise StoreError(f"Cannot write store {self._path}: {exc}") from exc
        logger.debug("Appended %d comics to %s", payload.count("\n"), self._path)
