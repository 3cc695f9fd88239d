"""Tests for read access and wholesale replacement."""

import pytest

from tasklist.events import CollectionReplacedEvent
from tasklist.exceptions import ItemIndexError
from tasklist.types import Item


def test_snapshot_is_immutable_copy(abcd_store) -> None:
    snap = abcd_store.snapshot()
    abcd_store.add("E")
    assert isinstance(snap, tuple)
    assert len(snap) == 4
    assert abcd_store.items[-1].text == "E"


def test_getitem_out_of_range(abcd_store) -> None:
    with pytest.raises(ItemIndexError):
        abcd_store[4]


def test_replace_swaps_collection(abcd_store, recorder) -> None:
    abcd_store.replace([Item("X", done=True)])
    assert abcd_store.snapshot() == (Item("X", done=True),)
    assert recorder.events == [CollectionReplacedEvent(count=1)]


def test_unsubscribe_stops_events(abcd_store, recorder) -> None:
    abcd_store.unsubscribe(recorder)
    abcd_store.add("E")
    assert recorder.events == []
