"""Per-call resolver hook.

Tracks translations at the point of use, so interpolated and pluralized
texts are indexed exactly as rendered.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from pycontentstorage._constants import POST_PROCESSOR_NAME
from pycontentstorage.store import TrackingStore
from pycontentstorage.variables import extract_user_variables

_logger = logging.getLogger(__name__)


def _primary_key(key: str | Sequence[str]) -> str | None:
    """First key of a fallback list, or *key* itself."""
    if isinstance(key, str):
        return key
    return key[0] if key else None


class TrackingPostProcessor:
    """Post-processor that records every resolved translation.

    ``process`` never alters the value; it only observes it.
    """

    type: ClassVar[str] = "postProcessor"
    name: ClassVar[str] = POST_PROCESSOR_NAME

    def __init__(self, store: TrackingStore, *, is_live_mode: bool = False) -> None:
        self._store = store
        self._is_live_mode = is_live_mode

    @property
    def is_live_mode(self) -> bool:
        return self._is_live_mode

    def process(
        self,
        value: str,
        key: str | Sequence[str],
        options: Mapping[str, Any] | None = None,
        language: str | None = None,
    ) -> str:
        if not self._is_live_mode:
            return value

        translation_key = _primary_key(key)
        if translation_key is None:
            return value

        # Namespace only when the key itself is colon-qualified.
        namespace: str | None = None
        if ":" in translation_key:
            namespace = translation_key.split(":", 1)[0]

        lng = options.get("lng") if isinstance(options, Mapping) else None

        self._store.track(
            value,
            translation_key,
            namespace,
            lng or language,
            extract_user_variables(options),
        )
        return value
