"""In-memory value-to-key tracking store.

Only this module creates, merges or removes tracked entries.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

from pycontentstorage._redact import redact_for_log
from pycontentstorage.keys import normalize_key
from pycontentstorage.models import TrackedEntry
from pycontentstorage.store.eviction import select_evictions

_logger = logging.getLogger(__name__)


def _now_ms() -> int:
    """Current epoch timestamp in milliseconds."""
    return int(time.time() * 1000)


class TrackingStore:
    """Reverse index from rendered text to the translation keys behind it.

    The backing map does not exist until :meth:`initialize` is called;
    until then :meth:`track` is a no-op.  Owners that are not in live
    editor mode simply never initialize it.

    Single-threaded by contract: every method runs synchronously on the
    caller's thread and the last write wins.
    """

    def __init__(self, *, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock
        self._entries: dict[str, TrackedEntry] | None = None

    def initialize(self) -> dict[str, TrackedEntry]:
        """Create the backing map if absent and return it."""
        if self._entries is None:
            self._entries = {}
        return self._entries

    def get(self) -> dict[str, TrackedEntry] | None:
        """Return the backing map, or ``None`` if never initialized."""
        return self._entries

    @property
    def is_initialized(self) -> bool:
        """Whether :meth:`initialize` has been called."""
        return self._entries is not None

    def __len__(self) -> int:
        """Number of tracked values (0 before initialization)."""
        return len(self._entries) if self._entries is not None else 0

    def __contains__(self, value: object) -> bool:
        return self._entries is not None and value in self._entries

    def entry(self, value: str) -> TrackedEntry | None:
        """Get the entry tracked for *value*, if any."""
        if self._entries is None:
            return None
        return self._entries.get(value)

    def clear(self) -> None:
        """Drop every entry; the store stays initialized."""
        if self._entries is not None:
            self._entries.clear()

    def track(
        self,
        value: str,
        key: str,
        namespace: str | None = None,
        language: str | None = None,
        variables: Mapping[str, Any] | None = None,
    ) -> None:
        """Record that *key* rendered *value*.

        Keys accumulate per value.  ``namespace``, ``language`` and the
        timestamp always take the latest write.  ``variables`` are replaced
        wholesale by a non-empty mapping and otherwise left untouched.
        """
        entries = self._entries
        if entries is None or not value:
            return

        normalized_key = normalize_key(key, namespace)

        entry = entries.get(value)
        if entry is None:
            entry = TrackedEntry()

        entry.keys.add(normalized_key)
        entry.kind = "text"
        entry.namespace = namespace
        entry.language = language
        entry.tracked_at = self._clock()
        if variables:
            entry.variables = dict(variables)

        entries[value] = entry

        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(
                "Tracked translation value=%r key=%s namespace=%s language=%s variables=%s",
                redact_for_log(value),
                normalized_key,
                namespace,
                language,
                redact_for_log(variables),
            )

    def evict(self, max_size: int) -> int:
        """Drop the least recently tracked values until *max_size* remain.

        Returns the number of entries removed.
        """
        entries = self._entries
        if entries is None:
            return 0

        doomed = select_evictions(entries, max_size)
        for value in doomed:
            del entries[value]

        if doomed:
            _logger.debug("Evicted %d tracked values (max_size=%d)", len(doomed), max_size)
        return len(doomed)
