"""Capture records and the capture stream reader.

A capture is one observed write to the trapped `secret` property. Captures
come out of the runtime environment as untyped JSON-like objects, so parsing
is permissive: a missing or wrong-typed field is treated as absent, never as
an error. The Selector decides what to do with absent fields.
"""

import math
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

Number = Union[int, float]


def read_field(obj: Any, name: str) -> Any:
    """Read `name` from a mapping or an attribute-bearing object."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def as_number(value: Any) -> Optional[Number]:
    """Return value if it is a usable version number (finite, not bool), else None."""
    # bool is an int subclass but never a version
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    return None


class CaptureRecord(BaseModel):
    """One intercepted write, with explicit presence for each field.

    `nested_version` is the `version` field of the object the write landed on
    (the capture's `obj`), which is the only part of `obj` ever consulted.
    """
    secret: Optional[str] = None
    version: Optional[Number] = None
    nested_version: Optional[Number] = None

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    @field_validator('secret', mode='before')
    @classmethod
    def replace_lone_surrogates(cls, v: Any) -> Any:
        """Replace unpaired UTF-16 surrogates with U+FFFD.

        JSON can carry "\\ud800" on its own; such a string cannot be written
        as UTF-8. Surrogate pairs that arrive split are joined.
        """
        if not isinstance(v, str):
            return v
        return v.encode("utf-16", "surrogatepass").decode("utf-16", "replace")

    @classmethod
    def from_raw(cls, raw: Any) -> "CaptureRecord":
        """Build a record from an untyped capture, dropping unusable fields."""
        if isinstance(raw, CaptureRecord):
            return raw
        if not isinstance(raw, dict):
            return cls()

        secret = raw.get("secret")
        if not isinstance(secret, str):
            secret = None

        nested_version = None
        obj = raw.get("obj")
        if obj is not None:
            try:
                nested_version = as_number(read_field(obj, "version"))
            except Exception:
                nested_version = None

        return cls(
            secret=secret,
            version=as_number(raw.get("version")),
            nested_version=nested_version,
        )

    def to_raw(self) -> Dict[str, Any]:
        """Inverse of from_raw for the fields that survive parsing."""
        raw: Dict[str, Any] = {}
        if self.secret is not None:
            raw["secret"] = self.secret
        if self.version is not None:
            raw["version"] = self.version
        if self.nested_version is not None:
            raw["obj"] = {"version": self.nested_version}
        return raw


class CaptureSession:
    """Environment-scoped capture state.

    Created when the runtime environment is initialised, written by the hook,
    read by the reader, discarded at teardown.
    """

    def __init__(self):
        self.hook_installed = False
        self._captures: List[Dict[str, Any]] = []

    def append(self, capture: Dict[str, Any]) -> None:
        self._captures.append(capture)

    def snapshot(self) -> Tuple[Dict[str, Any], ...]:
        """Point-in-time copy of everything captured so far."""
        return tuple(dict(c) for c in self._captures)

    def __len__(self) -> int:
        return len(self._captures)


def read_captures(source: Union[CaptureSession, Iterable[Any], None]) -> Tuple[CaptureRecord, ...]:
    """Read the capture stream once and parse it into records.

    Accepts a CaptureSession or an already-materialised sequence of raw
    captures (e.g. the result of evaluating the capture list in a page).
    Absent input reads as an empty sequence. Nothing is cleared or mutated.
    """
    if source is None:
        return ()
    raw = source.snapshot() if isinstance(source, CaptureSession) else tuple(source)
    return tuple(CaptureRecord.from_raw(item) for item in raw)
