"""Tests for keyword matching."""

import pytest

from tests.helpers import make_comic
from xkcd_search.core.domain.options import MatchMode, MatchScope
from xkcd_search.core.services.matcher import build_predicate, filter_comics, matches


@pytest.fixture
def rocket_comic():
    return make_comic(
        1,
        title="Hello World",
        alt="to the rocket",
        transcript="[[A stick figure stands next to a launch pad.]]",
    )


def test_match_all_with_only_empty_keywords_is_vacuously_true(rocket_comic):
    assert matches(rocket_comic, ["", ""], mode=MatchMode.ALL)


def test_match_all_with_no_keywords_is_true(rocket_comic):
    assert matches(rocket_comic, [], mode=MatchMode.ALL)


def test_match_any_with_no_keywords_is_false(rocket_comic):
    assert not matches(rocket_comic, [], mode=MatchMode.ANY)
    assert not matches(rocket_comic, ["", ""], mode=MatchMode.ANY)


def test_matching_is_case_insensitive():
    comic = make_comic(2, title="Up Goer Five", alt="a rocket ship")
    assert matches(comic, ["ROCKET"])
    assert matches(comic, ["up goer"], scope=MatchScope.TITLE)


def test_any_mode_all_fields_hits_alt_text(rocket_comic):
    assert matches(rocket_comic, ["rocket"], mode=MatchMode.ANY, scope=MatchScope.ALL)


def test_title_scope_excludes_alt_text_hits(rocket_comic):
    assert not matches(rocket_comic, ["rocket"], mode=MatchMode.ANY, scope=MatchScope.TITLE)


def test_alt_text_scope_excludes_title_and_transcript(rocket_comic):
    assert matches(rocket_comic, ["rocket"], scope=MatchScope.ALT_TEXT)
    assert not matches(rocket_comic, ["hello"], scope=MatchScope.ALT_TEXT)
    assert not matches(rocket_comic, ["launch"], scope=MatchScope.ALT_TEXT)


def test_all_fields_include_transcript(rocket_comic):
    assert matches(rocket_comic, ["launch pad"])


def test_all_mode_needs_every_keyword(rocket_comic):
    assert matches(rocket_comic, ["hello", "rocket"], mode=MatchMode.ALL)
    assert not matches(rocket_comic, ["hello", "banana"], mode=MatchMode.ALL)
    assert matches(rocket_comic, ["hello", "banana"], mode=MatchMode.ANY)


def test_keywords_may_hit_different_fields(rocket_comic):
    # "world" only in the title, "rocket" only in the alt-text.
    assert matches(rocket_comic, ["world", "rocket"], mode=MatchMode.ALL)


def test_empty_keywords_are_ignored(rocket_comic):
    assert matches(rocket_comic, ["", "rocket"], mode=MatchMode.ALL)
    assert not matches(rocket_comic, ["", "banana"], mode=MatchMode.ALL)
    assert matches(rocket_comic, ["", "rocket"], mode=MatchMode.ANY)


def test_build_predicate_binds_mode_and_scope(rocket_comic):
    predicate = build_predicate(MatchMode.ANY, MatchScope.TITLE)
    assert predicate(rocket_comic, ["world"])
    assert not predicate(rocket_comic, ["rocket"])


def test_filter_comics_keeps_order():
    comics = [
        make_comic(1, title="Barrel - Part 1"),
        make_comic(2, title="Petit Trees (sketch)"),
        make_comic(3, title="Barrel - Part 2"),
    ]
    assert [c.num for c in filter_comics(comics, ["barrel"])] == [1, 3]
