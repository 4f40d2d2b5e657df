"""Custom exception hierarchy for pycontentstorage."""

from __future__ import annotations


class ContentStorageError(Exception):
    """Base exception for all pycontentstorage errors."""


class ContentStorageConfigError(ContentStorageError):
    """Invalid or missing configuration."""


class ContentStorageTransportError(ContentStorageError):
    """Translation fetch failure (network, non-2xx, invalid JSON, bad payload shape)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)
