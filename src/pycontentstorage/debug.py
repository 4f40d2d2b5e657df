"""Diagnostics for the tracking store."""

from __future__ import annotations

import logging
from typing import Any

from pycontentstorage.store import TrackingStore

_logger = logging.getLogger(__name__)

_VALUE_WIDTH = 50


def describe_store(store: TrackingStore, limit: int = 10) -> list[dict[str, Any]]:
    """Tabular view of the first *limit* entries, in store order."""
    entries = store.get()
    if not entries:
        return []

    rows: list[dict[str, Any]] = []
    for value, entry in list(entries.items())[:limit]:
        rows.append(
            {
                "value": value[:_VALUE_WIDTH],
                "keys": ", ".join(sorted(entry.keys)),
                "namespace": entry.namespace or "N/A",
            }
        )
    return rows


def log_store_summary(store: TrackingStore, limit: int = 10) -> None:
    if not store.is_initialized:
        _logger.info("Tracking store not initialized")
        return

    total = len(store)
    _logger.info("Tracking store contents: %d entries", total)
    for row in describe_store(store, limit):
        _logger.info("  %-50s -> %s [%s]", row["value"], row["keys"], row["namespace"])
    if total > limit:
        _logger.info("... and %d more entries", total - limit)
