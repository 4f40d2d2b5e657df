"""pycontentstorage - Click-to-edit translation tracking for the ContentStorage live editor."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycontentstorage")
except PackageNotFoundError:
    __version__ = "0+local"
from pycontentstorage.client import LiveEditorClient
from pycontentstorage.config import TrackingConfig
from pycontentstorage.debug import describe_store, log_store_summary
from pycontentstorage.exceptions import (
    ContentStorageConfigError,
    ContentStorageError,
    ContentStorageTransportError,
)
from pycontentstorage.flatten import flatten_translations
from pycontentstorage.keys import extract_base_key, normalize_key, remove_interpolation
from pycontentstorage.live_mode import detect_live_mode
from pycontentstorage.loader import TranslationLoader
from pycontentstorage.models import TrackedEntry, TranslationData
from pycontentstorage.resolver import TrackingPostProcessor
from pycontentstorage.store import TrackingStore
from pycontentstorage.variables import extract_user_variables

__all__ = [
    "__version__",
    "ContentStorageConfigError",
    "ContentStorageError",
    "ContentStorageTransportError",
    "LiveEditorClient",
    "TrackedEntry",
    "TrackingConfig",
    "TrackingPostProcessor",
    "TrackingStore",
    "TranslationData",
    "TranslationLoader",
    "describe_store",
    "detect_live_mode",
    "extract_base_key",
    "extract_user_variables",
    "flatten_translations",
    "log_store_summary",
    "normalize_key",
    "remove_interpolation",
]
