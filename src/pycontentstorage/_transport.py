"""HTTP transport for translation payloads."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from pycontentstorage.exceptions import ContentStorageTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the loader.

    Having a protocol here makes it easy to pass test doubles or custom
    fetchers (auth headers, local files) while keeping the production
    implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, url: str) -> Any:
        ...


class HttpTransport:
    """GET JSON documents over aiohttp."""

    def __init__(self, http_session: aiohttp.ClientSession, *, timeout: float = 10.0) -> None:
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def get_json(self, url: str) -> Any:
        """Fetch *url* and decode its JSON body.

        Raises :class:`ContentStorageTransportError` on network errors,
        non-2xx statuses and undecodable bodies.
        """
        headers = {"accept": "application/json"}

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers=headers, timeout=self._timeout) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise ContentStorageTransportError(
                        f"Failed to load translations: {resp.status} {resp.reason}",
                        status_code=resp.status,
                        url=url,
                    )
        except ContentStorageTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise ContentStorageTransportError(
                f"Request to {url} failed: {exc}",
                url=url,
            ) from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ContentStorageTransportError(
                f"Invalid JSON from {url}: {text[:200]}",
                url=url,
            ) from exc
