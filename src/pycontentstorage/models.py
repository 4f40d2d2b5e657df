"""Data models for tracked translations."""

from __future__ import annotations

from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

TranslationData: TypeAlias = dict[str, "str | TranslationData"]
"""Nested translation payload as served by the CDN."""


class TrackedEntry(BaseModel):
    """Everything known about one rendered text value.

    The value itself is the store key and is not repeated here.

    Parameters
    ----------
    keys : set of str
        Canonical keys that have produced this value.  Only ever grows.
    kind : str
        Entry discriminator, always ``"text"``.
    namespace : str or None
        Namespace of the most recent write.
    language : str or None
        Language code of the most recent write.
    tracked_at : int
        Epoch milliseconds of the most recent write.  Eviction order.
    variables : dict or None
        Interpolation variables from the most recent write that supplied
        any.  Writes without variables leave them in place.
    """

    model_config = ConfigDict(extra="forbid")

    keys: set[str] = Field(default_factory=set)
    kind: Literal["text"] = "text"
    namespace: str | None = None
    language: str | None = None
    tracked_at: int = 0
    variables: dict[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Editor-facing dict (``ids``/``type``/``metadata``/``variables``)."""
        payload: dict[str, Any] = {
            "ids": sorted(self.keys),
            "type": self.kind,
            "metadata": {
                "namespace": self.namespace,
                "language": self.language,
                "trackedAt": self.tracked_at,
            },
        }
        if self.variables:
            payload["variables"] = dict(self.variables)
        return payload
