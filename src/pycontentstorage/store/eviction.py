"""Deterministic eviction policy.

This module only decides *which* values go; removal is the store's job.
"""

from __future__ import annotations

from collections.abc import Mapping

from pycontentstorage.models import TrackedEntry


def excess_count(current_size: int, max_size: int) -> int:
    """Number of entries above *max_size* (never negative)."""
    if max_size < 0:
        raise ValueError(f"max_size must be >= 0, got {max_size}")
    return max(0, current_size - max_size)


def select_evictions(entries: Mapping[str, TrackedEntry], max_size: int) -> list[str]:
    """Return the values to drop so that at most *max_size* remain.

    Oldest ``tracked_at`` first.  The sort is stable, so equal timestamps
    keep the mapping's iteration order (first-insertion order for a dict).
    """
    to_remove = excess_count(len(entries), max_size)
    if not to_remove:
        return []

    ordered = sorted(entries.items(), key=lambda item: item[1].tracked_at)
    return [value for value, _entry in ordered[:to_remove]]
