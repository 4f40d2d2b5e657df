"""Live editor mode detection."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

from pycontentstorage._constants import LIVE_EDITOR_PARAM


def has_query_param(url: str, param: str) -> bool:
    """Return ``True`` if *param* appears in the query string of *url*.

    A bare ``?param`` without a value counts.
    """
    query = urlsplit(url).query
    return param in parse_qs(query, keep_blank_values=True)


def detect_live_mode(
    url: str | None = None,
    *,
    in_iframe: bool = False,
    param: str = LIVE_EDITOR_PARAM,
    force: bool = False,
) -> bool:
    """Decide whether tracking should be active for this page.

    The live editor embeds the application in a frame and marks the URL
    with *param*; both conditions must hold unless *force* is set.
    """
    if force:
        return True
    if not in_iframe or not url:
        return False
    return has_query_param(url, param)
