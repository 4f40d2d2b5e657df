"""Tracking configuration for pycontentstorage."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable
from typing import Any

from pycontentstorage._constants import CDN_BASE_URL, DEFAULT_MAX_STORE_SIZE, LIVE_EDITOR_PARAM

LoadPath = str | Callable[[str, str], str]


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_list(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclasses.dataclass(frozen=True)
class TrackingConfig:
    """Loader and live editor configuration.

    Parameters
    ----------
    content_key : str or None
        ContentStorage content key.  Required when translations are
        fetched from the default CDN path.
    cdn_base_url : str
        Base URL of the translation CDN.
    max_store_size : int
        Maximum number of tracked values kept after each bulk load.
        Oldest entries (by last write) are evicted first.  ``0``
        disables eviction.
    load_path : str, callable or None
        Custom translation URL.  A string may contain ``{{lng}}`` and
        ``{{ns}}`` placeholders; a callable receives
        ``(language, namespace)`` and returns the URL.
    live_editor_param : str
        Query parameter that marks a page as opened by the live editor.
    force_live_mode : bool
        Treat every page as live regardless of URL and framing.
    track_namespaces : tuple of str
        Namespaces whose payloads are tracked.  Empty tracks all.
    request_timeout : float
        Total timeout in seconds for a translation fetch.
    """

    content_key: str | None = None
    cdn_base_url: str = CDN_BASE_URL
    max_store_size: int = DEFAULT_MAX_STORE_SIZE
    load_path: LoadPath | None = None
    live_editor_param: str = LIVE_EDITOR_PARAM
    force_live_mode: bool = False
    track_namespaces: tuple[str, ...] = ()
    request_timeout: float = 10.0

    @classmethod
    def from_env(cls, **overrides: Any) -> TrackingConfig:
        """Create configuration from ``CONTENTSTORAGE_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "CONTENTSTORAGE_CONTENT_KEY": "content_key",
            "CONTENTSTORAGE_CDN_BASE_URL": "cdn_base_url",
            "CONTENTSTORAGE_LOAD_PATH": "load_path",
            "CONTENTSTORAGE_LIVE_EDITOR_PARAM": "live_editor_param",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        max_size_env = env.get("CONTENTSTORAGE_MAX_STORE_SIZE")
        if max_size_env is not None and "max_store_size" not in overrides:
            config_kwargs["max_store_size"] = int(max_size_env)

        if "force_live_mode" not in overrides:
            config_kwargs["force_live_mode"] = _env_bool(env.get("CONTENTSTORAGE_FORCE_LIVE_MODE"), False)

        namespaces_env = env.get("CONTENTSTORAGE_TRACK_NAMESPACES")
        if namespaces_env is not None and "track_namespaces" not in overrides:
            config_kwargs["track_namespaces"] = _env_list(namespaces_env)

        timeout_env = env.get("CONTENTSTORAGE_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = float(timeout_env)

        if "track_namespaces" in overrides:
            overrides["track_namespaces"] = tuple(overrides["track_namespaces"])

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
