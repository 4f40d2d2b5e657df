from __future__ import annotations

import pytest
from pydantic import ValidationError

from pycontentstorage.models import TrackedEntry


def test_defaults() -> None:
    entry = TrackedEntry()

    assert entry.keys == set()
    assert entry.kind == "text"
    assert entry.variables is None


def test_kind_is_fixed_to_text() -> None:
    with pytest.raises(ValidationError):
        TrackedEntry(kind="image")  # type: ignore[arg-type]


def test_extra_fields_forbidden() -> None:
    with pytest.raises(ValidationError):
        TrackedEntry(value="Welcome")  # type: ignore[call-arg]


def test_to_payload() -> None:
    entry = TrackedEntry(keys={"b.key", "a.key"}, namespace="common", language="en", tracked_at=5)

    assert entry.to_payload() == {
        "ids": ["a.key", "b.key"],
        "type": "text",
        "metadata": {"namespace": "common", "language": "en", "trackedAt": 5},
    }

    entry.variables = {"name": "Ada"}
    assert entry.to_payload()["variables"] == {"name": "Ada"}
