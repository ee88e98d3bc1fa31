"""Tests for the JSON-lines comic store."""

import json

import pytest

from tests.helpers import make_comic
from xkcd_search.adapters.storage import JsonLinesStore
from xkcd_search.core.errors import StoreError


def test_missing_store_is_created_empty(store_path):
    store = JsonLinesStore(store_path)

    comics, highest = store.load_all()

    assert comics == []
    assert highest == 0
    assert store_path.exists()


def test_round_trip_preserves_fields(store_path):
    store = JsonLinesStore(store_path)
    originals = [
        make_comic(3, alt="third", transcript="Line one\nLine two"),
        make_comic(1, title="Barrel - Part 1", safe_title="Barrel - Part 1"),
        make_comic(2, title="Café", safe_title="Cafe"),
    ]

    store.store(originals)
    comics, highest = store.load_all()

    assert highest == 3
    assert [c.num for c in comics] == [1, 2, 3]
    assert {c.num: c for c in comics} == {c.num: c for c in originals}


def test_store_appends(store_path):
    store = JsonLinesStore(store_path)
    store.store([make_comic(1), make_comic(2)])
    store.store([make_comic(5)])

    comics, highest = store.load_all()

    assert [c.num for c in comics] == [1, 2, 5]
    assert highest == 5
    assert len(store_path.read_text(encoding="utf-8").splitlines()) == 3


def test_one_json_object_per_line(store_path):
    JsonLinesStore(store_path).store([make_comic(1), make_comic(2)])

    lines = store_path.read_text(encoding="utf-8").splitlines()

    assert [json.loads(line)["num"] for line in lines] == [1, 2]


def test_storing_nothing_leaves_file_untouched(store_path):
    store = JsonLinesStore(store_path)
    store.store([make_comic(1)])
    before = store_path.read_text(encoding="utf-8")

    store.store([])

    assert store_path.read_text(encoding="utf-8") == before


def test_corrupt_record_raises_store_error(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text('{"num": 1, "title": "ok"}\nnot json\n', encoding="utf-8")

    with pytest.raises(StoreError):
        JsonLinesStore(store_path).load_all()


def test_unreadable_location_raises_store_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")

    with pytest.raises(StoreError):
        JsonLinesStore(blocker / "store.db").load_all()


def test_unwritable_store_raises_store_error(store_path):
    store_path.mkdir(parents=True)

    with pytest.raises(StoreError):
        JsonLinesStore(store_path).store([make_comic(1)])
