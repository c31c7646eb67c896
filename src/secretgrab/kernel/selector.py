"""Secret selection: one winning secret per version (pure logic)."""

from typing import Any, Dict, Iterable, Optional

from secretgrab.kernel.capture import CaptureRecord, as_number


def resolve_version(record: CaptureRecord) -> Optional[int]:
    """Resolve a record's version.

    The record's own version wins when present; otherwise the version of the
    object the write landed on. Floats truncate toward zero, and inf or nan
    count as absent. Returns None when unresolved or when the version is not
    positive (0 is the sentinel).
    """
    raw = as_number(record.version)
    if raw is None:
        raw = as_number(record.nested_version)
    if raw is None:
        return None
    version = int(raw)
    if version <= 0:
        return None
    return version


def select_secrets(captures: Iterable[Any]) -> Dict[int, str]:
    """Filter captures down to {version: secret}.

    Records without a string secret or a usable version are skipped. When a
    version is observed more than once the last observation wins.

    Args:
        captures: CaptureRecord instances or raw capture dicts, in write order

    Returns:
        Mapping from version to secret; empty when nothing qualified
    """
    selected: Dict[int, str] = {}
    for capture in captures:
        record = CaptureRecord.from_raw(capture)
        if record.secret is None:
            continue
        version = resolve_version(record)
        if version is None:
            continue
        selected[version] = record.secret
    return selected
