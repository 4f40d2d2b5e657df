"""Flatten nested translation payloads into dotted key/value pairs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def flatten_translations(tree: Mapping[str, Any], prefix: str = "") -> list[tuple[str, str]]:
    """Return ``(dotted_key, text)`` pairs for every string leaf in *tree*.

    Traversal is depth-first in the mapping's own order.  Leaves that are not
    strings (numbers, booleans, lists, ``None``) are skipped.
    """
    results: list[tuple[str, str]] = []

    for key, value in tree.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)

        if isinstance(value, str):
            results.append((full_key, value))
        elif isinstance(value, Mapping):
            results.extend(flatten_translations(value, full_key))

    return results
