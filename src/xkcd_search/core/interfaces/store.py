"""Local comic store contract."""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from xkcd_search.core.domain.models import ComicRecord


@runtime_checkable
class ComicStore(Protocol):
    """Opaque cache of comics; the core does not know its storage format.

    Both operations raise `StoreError` on failure.
    """

    def load_all(self) -> tuple[list[ComicRecord], int]:
        """Return every stored comic (sorted by `num`) and the highest `num` (0 if empty)."""

        ...

    def store(self, comics: Iterable[ComicRecord]) -> None:
        """Persist the given comics."""

        ...
