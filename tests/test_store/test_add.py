"""Tests for ItemStore.add."""

import pytest

from tasklist.events import ItemAddedEvent
from tasklist.store import ItemStore
from tasklist.types import Item


def test_add_trims_text() -> None:
    store = ItemStore()
    store.add("  buy milk  ")
    assert store.snapshot() == (Item(text="buy milk", done=False),)


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
def test_blank_or_missing_text_is_ignored(raw, recorder) -> None:
    store = ItemStore(observers=[recorder])
    store.add(raw)
    assert len(store) == 0
    assert recorder.events == []


def test_add_appends_in_order_and_notifies(recorder) -> None:
    store = ItemStore(observers=[recorder])
    store.add("first")
    store.add("second")

    assert [item.text for item in store] == ["first", "second"]
    assert recorder.events == [
        ItemAddedEvent(index=0, text="first"),
        ItemAddedEvent(index=1, text="second"),
    ]


def test_add_keeps_inner_whitespace() -> None:
    store = ItemStore()
    store.add(" a | b ")
    assert store[0].text == "a | b"
