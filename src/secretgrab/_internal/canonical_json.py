"""Centralized JSON serialization for artifacts.

Every artifact write goes through these two functions so the same capture
snapshot always produces the same bytes.

Rules:
- UTF-8 (ensure_ascii=False)
- Key order is insertion order, NOT sorted: entries render as
  {"version", "secret"} and keyed maps render in ascending version order.
  Callers are responsible for building dicts in a deterministic order.
- Compact form uses separators (",", ":")
- Pretty form uses a two-space indent
- No trailing whitespace
"""

import json
from typing import Any


def compact_dumps(obj: Any) -> str:
    """Compact JSON for machine-facing artifacts."""
    return json.dumps(
        obj,
        separators=(",", ":"),
        ensure_ascii=False
    )


def pretty_dumps(obj: Any) -> str:
    """Indented JSON for human-facing artifacts."""
    return json.dumps(
        obj,
        indent=2,
        ensure_ascii=False
    )
