#!/usr/bin/env python3
"""Index a local translation file and print the value-to-key map.

Usage
-----
    python scripts/dump_index.py locales/en.json
    python scripts/dump_index.py --language de --max-size 100 locales/de.json
    python scripts/dump_index.py --language de --namespace common locales/de/common.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pycontentstorage.flatten import flatten_translations
from pycontentstorage.store import TrackingStore

_logger = logging.getLogger(__name__)


def build_index(
    payload: dict[str, Any],
    *,
    language: str,
    namespace: str | None = None,
    max_size: int = 0,
) -> dict[str, Any]:
    """Track every string leaf of *payload* into a fresh store.

    Like the bulk loader, keys are tracked without their namespace.
    """
    store = TrackingStore()
    store.initialize()
    flat = flatten_translations(payload)
    for key, value in flat:
        store.track(value, key, None, language)
    _logger.debug("Tracked %d translations for %s", len(flat), namespace or "<no namespace>")
    if max_size:
        store.evict(max_size)
    entries = store.get() or {}
    return {value: entry.to_payload() for value, entry in entries.items()}


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("file", type=Path, help="JSON translation file")
    parser.add_argument("--language", default="en")
    parser.add_argument("--namespace", default=None, help="namespace the file belongs to (logged only)")
    parser.add_argument("--max-size", type=int, default=0, help="evict down to this many entries (0 = no cap)")
    parser.add_argument("--limit", type=int, default=0, help="print only the first N entries")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        payload = json.loads(args.file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
        return 1
    if not isinstance(payload, dict):
        print(f"{args.file} does not contain a JSON object", file=sys.stderr)
        return 1

    index = build_index(payload, language=args.language, namespace=args.namespace, max_size=args.max_size)
    if args.limit:
        index = dict(list(index.items())[: args.limit])

    json.dump(index, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
