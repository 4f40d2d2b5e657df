"""Tracking store layer.

This package is the single place where rendered values are mapped to the
translation keys that produced them, and where the size cap is enforced.
"""

from pycontentstorage.store.store import TrackingStore

__all__ = ["TrackingStore"]
