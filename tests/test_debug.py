from __future__ import annotations

import logging

import pytest

from pycontentstorage.debug import describe_store, log_store_summary
from pycontentstorage.store import TrackingStore


def test_describe_store_rows() -> None:
    store = TrackingStore()
    store.initialize()
    store.track("x" * 80, "long.text", "pages", "en")
    store.track("Welcome", "welcome")
    store.track("Welcome", "common:welcome", "common")

    rows = describe_store(store)

    assert rows == [
        {"value": "x" * 50, "keys": "long.text", "namespace": "pages"},
        {"value": "Welcome", "keys": "common.welcome, welcome", "namespace": "common"},
    ]


def test_describe_store_limit_and_uninitialized() -> None:
    store = TrackingStore()
    assert describe_store(store) == []

    store.initialize()
    for i in range(5):
        store.track(f"v{i}", f"k{i}")

    assert [row["value"] for row in describe_store(store, limit=2)] == ["v0", "v1"]


def test_log_store_summary(caplog: pytest.LogCaptureFixture) -> None:
    store = TrackingStore()

    with caplog.at_level(logging.INFO, logger="pycontentstorage.debug"):
        log_store_summary(store)
        store.initialize()
        for i in range(3):
            store.track(f"v{i}", f"k{i}")
        log_store_summary(store, limit=2)

    messages = [record.getMessage() for record in caplog.records]
    assert messages[0] == "Tracking store not initialized"
    assert "Tracking store contents: 3 entries" in messages
    assert messages[-1] == "... and 1 more entries"
