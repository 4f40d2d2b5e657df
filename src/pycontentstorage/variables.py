"""Split user interpolation variables out of framework call options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pycontentstorage._constants import RESERVED_OPTION_KEYS


def is_user_variable(name: str) -> bool:
    """Return ``True`` for option names that belong to the caller."""
    return name not in RESERVED_OPTION_KEYS and not name.startswith("_")


def extract_user_variables(options: Any) -> dict[str, Any] | None:
    """Return the user-supplied variables of a translation call.

    Reserved framework options, ``_``-prefixed internals and ``None``
    values are dropped.  Returns ``None`` when nothing is left or when
    *options* is not a mapping.
    """
    if not isinstance(options, Mapping):
        return None

    variables = {
        str(name): value for name, value in options.items() if is_user_variable(str(name)) and value is not None
    }
    return variables or None
