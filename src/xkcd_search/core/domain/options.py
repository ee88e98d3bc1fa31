"""Search options shared by the CLI and the matcher.

Keeping them in the domain layer lets both the CLI and the services use a
single source of truth without circular imports.
"""

from __future__ import annotations

from enum import Enum


class MatchMode(str, Enum):
    """How several keywords are combined."""

    ALL = "all"
    ANY = "any"

    @classmethod
    def from_bool(cls, any_keyword: bool) -> "MatchMode":
        """Derive a mode from the `--any/--all` flag."""

        return cls.ANY if any_keyword else cls.ALL


class MatchScope(str, Enum):
    """Which text fields of a comic are searched."""

    ALL = "all"
    TITLE = "title"
    ALT_TEXT = "alt-text"

    def label(self) -> str:
        """Human readable label for logging."""

        if self is MatchScope.TITLE:
            return "title"
        if self is MatchScope.ALT_TEXT:
            return "alt-text"
        return "all fields"
