"""Translation key helpers.

Keys are tracked in one canonical, dot-delimited form so that the live
editor can match them against content identifiers assigned upstream.
"""

from __future__ import annotations

import re

from pycontentstorage._constants import PLURAL_SUFFIXES

_PLURAL_SUFFIX_RE = re.compile(r"_(" + "|".join(sorted(PLURAL_SUFFIXES)) + r")$")
_INTERPOLATION_RE = re.compile(r"\{\{[^}]+\}\}")


def normalize_key(key: str, namespace: str | None = None) -> str:
    """Convert ``namespace:key`` notation to ``namespace.key``.

    Only the first colon is rewritten.  *namespace* is accepted for call-site
    symmetry but never prepended: explicit colon notation is the only
    namespace signal, so keys stay identical to their content IDs.

    Normalizing twice is a no-op only for keys with at most one colon.
    A key with more colons loses one per call: ``"a:b:c"`` becomes
    ``"a.b:c"`` and then ``"a.b.c"``.

    >>> normalize_key("common:welcome")
    'common.welcome'
    >>> normalize_key("a:b:c")
    'a.b:c'
    """
    del namespace
    return key.replace(":", ".", 1)


def extract_base_key(key: str) -> str:
    """Strip a trailing plural suffix (``items_one`` -> ``items``).

    Context suffixes (``friend_male``) are left alone: they cannot be told
    apart from literal key segments without the framework's context list.
    """
    return _PLURAL_SUFFIX_RE.sub("", key)


def remove_interpolation(value: str) -> str:
    """Drop ``{{variable}}`` placeholders from a rendered template."""
    return _INTERPOLATION_RE.sub("", value).strip()
