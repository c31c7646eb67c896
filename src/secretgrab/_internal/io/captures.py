"""Capture snapshot I/O helpers (internal)."""

import json
from pathlib import Path
from typing import Any, Iterable, List, Union

from secretgrab._internal.canonical_json import compact_dumps
from secretgrab.kernel.capture import CaptureRecord


def load_captures_from_path(path: Union[str, Path]) -> List[Any]:
    """Load a raw capture snapshot (a JSON array) from disk."""
    captures_path = Path(path)
    with open(captures_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(
            f"Capture snapshot must be a JSON array, got {type(data).__name__}: {captures_path}"
        )
    return data


def write_captures(records: Iterable[CaptureRecord], path: Union[str, Path]) -> Path:
    """Persist parsed records in the same shape the page produces."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(compact_dumps([r.to_raw() for r in records]) + "\n", encoding="utf-8")
    return out
