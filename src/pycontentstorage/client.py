"""High-level async entry point for live editor tracking."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import aiohttp

from pycontentstorage._constants import DEFAULT_LANGUAGE
from pycontentstorage._transport import HttpTransport, Transport
from pycontentstorage.config import TrackingConfig
from pycontentstorage.exceptions import ContentStorageError
from pycontentstorage.live_mode import detect_live_mode
from pycontentstorage.loader import TranslationLoader
from pycontentstorage.models import TranslationData
from pycontentstorage.resolver import TrackingPostProcessor
from pycontentstorage.store import TrackingStore

_logger = logging.getLogger(__name__)


class LiveEditorClient:
    """Owns the tracking store and the collaborators that feed it.

    Usage::

        async with LiveEditorClient(config, url=page_url, in_iframe=True) as client:
            translations = await client.read("en", "common")
            text = client.process(rendered, "common:welcome", {"name": "Ada"})

    Live mode is decided once, at construction.  Outside live mode the
    store is never initialized, so nothing is tracked.
    """

    def __init__(
        self,
        config: TrackingConfig,
        *,
        url: str | None = None,
        in_iframe: bool = False,
        language: str | None = None,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        store: TrackingStore | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._external_transport = transport
        self._transport: Transport | None = transport
        self._store = store if store is not None else TrackingStore()
        self._current_language = language or DEFAULT_LANGUAGE

        self._is_live_mode = detect_live_mode(
            url,
            in_iframe=in_iframe,
            param=config.live_editor_param,
            force=config.force_live_mode,
        )

        if self._is_live_mode:
            self._store.initialize()
            _logger.info("Live editor mode enabled")
        else:
            _logger.debug("Running in normal mode (not live editor)")

        self._post_processor = TrackingPostProcessor(self._store, is_live_mode=self._is_live_mode)
        self._loader: TranslationLoader | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> LiveEditorClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._http_session, timeout=self._config.request_timeout)
        self._loader = TranslationLoader(
            self._config,
            self._store,
            self._transport,
            is_live_mode=self._is_live_mode,
        )
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = self._external_transport
        self._loader = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def is_live_mode(self) -> bool:
        return self._is_live_mode

    @property
    def store(self) -> TrackingStore:
        return self._store

    @property
    def post_processor(self) -> TrackingPostProcessor:
        return self._post_processor

    @property
    def loader(self) -> TranslationLoader:
        if self._loader is None:
            raise ContentStorageError("Client not initialized. Use 'async with LiveEditorClient(...) as client:'")
        return self._loader

    @property
    def current_language(self) -> str:
        return self._current_language

    def set_language(self, language: str) -> None:
        """Record a language change of the host translation framework."""
        self._current_language = language
        _logger.debug("Language changed to: %s", language)

    # ------------------------------------------------------------------
    # Tracking
    # ------------------------------------------------------------------

    async def read(self, language: str, namespace: str) -> TranslationData:
        """Load one translation payload (tracked when live)."""
        return await self.loader.read(language, namespace)

    def process(
        self,
        value: str,
        key: str | Sequence[str],
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Resolver hook; falls back to the current language."""
        return self._post_processor.process(value, key, options, self._current_language)
