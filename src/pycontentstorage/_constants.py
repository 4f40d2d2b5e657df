"""Internal constants shared across the library."""

CDN_BASE_URL = "https://cdn.contentstorage.app"
LIVE_EDITOR_PARAM = "contentstorage_live_editor"
POST_PROCESSOR_NAME = "contentstorage"
DEFAULT_MAX_STORE_SIZE = 10_000
DEFAULT_LANGUAGE = "en"

# i18next-style plural suffixes, joined to the base key with "_".
PLURAL_SUFFIXES: frozenset[str] = frozenset({"zero", "one", "two", "few", "many", "other", "plural"})

# ------------------------------------------------------------------
# Call options owned by the translation framework.  Everything else
# passed alongside a lookup is a user interpolation variable.
# ------------------------------------------------------------------

RESERVED_OPTION_KEYS: frozenset[str] = frozenset(
    {
        # language
        "lng",
        "lngs",
        "fallbackLng",
        # namespace
        "ns",
        # default value
        "defaultValue",
        # pluralization
        "count",
        "ordinal",
        "context",
        # framework flags
        "returnObjects",
        "returnDetails",
        "joinArrays",
        "postProcess",
        "interpolation",
        "keySeparator",
        "nsSeparator",
        "replace",
        "skipInterpolation",
    }
)
