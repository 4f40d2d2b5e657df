"""Bulk translation loader.

Fetches one ``(language, namespace)`` payload, hands every string leaf to
the tracking store and then enforces the store's size cap.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pycontentstorage._transport import Transport
from pycontentstorage.config import TrackingConfig
from pycontentstorage.exceptions import ContentStorageConfigError, ContentStorageTransportError
from pycontentstorage.flatten import flatten_translations
from pycontentstorage.models import TranslationData
from pycontentstorage.store import TrackingStore

_logger = logging.getLogger(__name__)


class TranslationLoader:
    """Load translation payloads and index them for the live editor."""

    def __init__(
        self,
        config: TrackingConfig,
        store: TrackingStore,
        transport: Transport,
        *,
        is_live_mode: bool = False,
    ) -> None:
        self._config = config
        self._store = store
        self._transport = transport
        self._is_live_mode = is_live_mode

    def get_load_path(self, language: str, namespace: str) -> str:
        """Resolve the URL for one language/namespace payload."""
        load_path = self._config.load_path

        if callable(load_path):
            return load_path(language, namespace)

        if isinstance(load_path, str):
            return load_path.replace("{{lng}}", language, 1).replace("{{ns}}", namespace, 1)

        if not self._config.content_key:
            raise ContentStorageConfigError("content_key is required when using default CDN path")

        # The CDN stores one document per language, keyed by upper-case code.
        base_url = self._config.cdn_base_url.rstrip("/")
        return f"{base_url}/{self._config.content_key}/content/{language.upper()}.json"

    def should_track_namespace(self, namespace: str) -> bool:
        track_namespaces = self._config.track_namespaces
        if not track_namespaces:
            return True
        return namespace in track_namespaces

    async def read(self, language: str, namespace: str) -> TranslationData:
        """Fetch translations and, in live mode, track them.

        Errors from the transport are logged and re-raised unchanged.
        """
        _logger.debug("Loading translations: %s/%s", language, namespace)

        translations = await self._load(language, namespace)

        if self._is_live_mode and self.should_track_namespace(namespace):
            self.track_translations(translations, namespace, language)

            if self._config.max_store_size:
                self._store.evict(self._config.max_store_size)

        return translations

    async def _load(self, language: str, namespace: str) -> TranslationData:
        url = self.get_load_path(language, namespace)
        _logger.debug("Fetching from: %s", url)

        try:
            payload: Any = await self._transport.get_json(url)
        except ContentStorageTransportError as exc:
            _logger.debug("Failed to load translations from %s: %s", url, exc)
            raise

        if not isinstance(payload, Mapping):
            raise ContentStorageTransportError(
                f"Translation payload from {url} is not an object: {type(payload).__name__}",
                url=url,
            )
        return dict(payload)

    def track_translations(self, translations: Mapping[str, Any], namespace: str, language: str) -> int:
        """Track every string leaf of *translations*; return the leaf count.

        The namespace is deliberately not attached: bulk-loaded keys are
        tracked exactly as they appear in the payload.
        """
        flat = flatten_translations(translations)

        for key, value in flat:
            if not value:
                continue
            self._store.track(value, key, None, language)

        _logger.debug("Tracked %d translations for %s", len(flat), namespace)
        return len(flat)
