from __future__ import annotations

from typing import Any

import aiohttp
import pytest

from pycontentstorage._transport import HttpTransport
from pycontentstorage.exceptions import ContentStorageTransportError

_URL = "https://cdn.contentstorage.app/key/content/EN.json"


class _FakeResponse:
    def __init__(self, status: int, body: str, reason: str = "OK") -> None:
        self.status = status
        self.reason = reason
        self._body = body

    async def text(self) -> str:
        return self._body

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


class _FailingResponse:
    async def __aenter__(self) -> _FakeResponse:
        raise aiohttp.ClientConnectionError("connection refused")

    async def __aexit__(self, *exc: Any) -> None:
        return None


class _FakeSession:
    def __init__(self, response: Any) -> None:
        self._response = response
        self.requests: list[tuple[str, dict[str, str]]] = []

    def get(self, url: str, *, headers: dict[str, str], timeout: Any = None) -> Any:
        self.requests.append((url, headers))
        return self._response


@pytest.mark.asyncio
async def test_get_json_decodes_body() -> None:
    session = _FakeSession(_FakeResponse(200, '{"welcome": "Welcome"}'))
    transport = HttpTransport(session)  # type: ignore[arg-type]

    assert await transport.get_json(_URL) == {"welcome": "Welcome"}
    assert session.requests == [(_URL, {"accept": "application/json"})]


@pytest.mark.asyncio
async def test_non_2xx_status_raises() -> None:
    transport = HttpTransport(_FakeSession(_FakeResponse(404, "missing", reason="Not Found")))  # type: ignore[arg-type]

    with pytest.raises(ContentStorageTransportError) as exc_info:
        await transport.get_json(_URL)

    assert exc_info.value.status_code == 404
    assert exc_info.value.url == _URL
    assert "404 Not Found" in str(exc_info.value)


@pytest.mark.asyncio
async def test_client_error_is_wrapped() -> None:
    transport = HttpTransport(_FakeSession(_FailingResponse()))  # type: ignore[arg-type]

    with pytest.raises(ContentStorageTransportError) as exc_info:
        await transport.get_json(_URL)

    assert isinstance(exc_info.value.__cause__, aiohttp.ClientError)
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_invalid_json_raises() -> None:
    transport = HttpTransport(_FakeSession(_FakeResponse(200, "<html>")))  # type: ignore[arg-type]

    with pytest.raises(ContentStorageTransportError, match="Invalid JSON"):
        await transport.get_json(_URL)
