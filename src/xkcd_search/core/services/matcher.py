"""Keyword matching over a comic's text fields.

Matching is case-insensitive substring containment. Empty keywords never
count, so with no usable keyword `ALL` matches every comic and `ANY` none.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from xkcd_search.core.domain.models import ComicRecord
from xkcd_search.core.domain.options import MatchMode, MatchScope

Predicate = Callable[[ComicRecord, Sequence[str]], bool]


def keyword_in_fields(keyword: str, fields: Iterable[str]) -> bool:
    key = keyword.lower()
    return any(key in field.lower() for field in fields)


def all_keywords_in_fields(keywords: Iterable[str], fields: Sequence[str]) -> bool:
    return all(keyword_in_fields(key, fields) for key in keywords if key)


def any_keyword_in_fields(keywords: Iterable[str], fields: Sequence[str]) -> bool:
    return any(keyword_in_fields(key, fields) for key in keywords if key)


def matches(
    comic: ComicRecord,
    keywords: Sequence[str],
    *,
    mode: MatchMode = MatchMode.ALL,
    scope: MatchScope = MatchScope.ALL,
) -> bool:
    """Whether `comic` matches `keywords` under the given mode and scope."""

    fields = comic.text_fields(scope)
    if mode is MatchMode.ANY:
        return any_keyword_in_fields(keywords, fields)
    return all_keywords_in_fields(keywords, fields)


def build_predicate(mode: MatchMode = MatchMode.ALL, scope: MatchScope = MatchScope.ALL) -> Predicate:
    """Bind mode and scope once, for filtering many comics."""

    def predicate(comic: ComicRecord, keywords: Sequence[str]) -> bool:
        return matches(comic, keywords, mode=mode, scope=scope)

    return predicate


def filter_comics(
    comics: Iterable[ComicRecord],
    keywords: Sequence[str],
    *,
    mode: MatchMode = MatchMode.ALL,
    scope: MatchScope = MatchScope.ALL,
) -> list[ComicRecord]:
    predicate = build_predicate(mode, scope)
    return [comic for comic in comics if predicate(comic, keywords)]
