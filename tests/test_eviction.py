from __future__ import annotations

import pytest

from pycontentstorage.models import TrackedEntry
from pycontentstorage.store.eviction import excess_count, select_evictions


def _entries(*stamps: tuple[str, int]) -> dict[str, TrackedEntry]:
    return {value: TrackedEntry(keys={value}, tracked_at=ts) for value, ts in stamps}


def test_excess_count() -> None:
    assert excess_count(10, 4) == 6
    assert excess_count(3, 4) == 0
    assert excess_count(4, 4) == 0
    with pytest.raises(ValueError):
        excess_count(1, -1)


def test_select_oldest_first_regardless_of_insertion_order() -> None:
    entries = _entries(("c", 30), ("a", 10), ("d", 40), ("b", 20))

    assert select_evictions(entries, 2) == ["a", "b"]


def test_select_ties_keep_mapping_order() -> None:
    entries = _entries(("x", 5), ("y", 5), ("z", 5))

    assert select_evictions(entries, 1) == ["x", "y"]


def test_select_nothing_when_within_limit() -> None:
    assert select_evictions(_entries(("a", 1)), 1) == []
    assert select_evictions({}, 0) == []
