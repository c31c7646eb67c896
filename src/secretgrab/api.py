"""Public API for the secretgrab package.

High-level functions that return complete, structured results.
Callers should use these functions instead of importing from _internal.
"""

import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from secretgrab.codes import PipelineStatus
from secretgrab.config import GrabConfig
from secretgrab.kernel.capture import CaptureRecord, read_captures
from secretgrab.kernel.encoder import encode_secret
from secretgrab.kernel.formatter import format_secrets
from secretgrab.kernel.models import SecretArtifacts
from secretgrab.kernel.selector import select_secrets
from secretgrab._internal.canonical_json import compact_dumps
from secretgrab._internal.io.artifact_sink import DEFAULT_OUTPUT_DIR, write_artifacts
from secretgrab._internal.io.captures import load_captures_from_path

NO_REAL_SECRETS_MESSAGE = "No real secrets with version."


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


class PipelineResult(BaseModel):
    """Stable result model for one pipeline run."""
    status: PipelineStatus
    message: Optional[str] = None  # Set when no artifacts were produced
    artifacts: Optional[SecretArtifacts] = None
    written: Dict[str, Path] = Field(default_factory=dict)  # filename -> path, empty when nothing was written

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.status == PipelineStatus.OK


def summarise(captures: Iterable[Any]) -> Optional[SecretArtifacts]:
    """Select, format and encode a capture snapshot.

    Args:
        captures: Raw capture dicts or CaptureRecord instances, in write order

    Returns:
        SecretArtifacts, or None when no capture survived selection

    Raises:
        MalformedHexError: if the encoder's hex stage fails to decode
    """
    selected = select_secrets(captures)
    if not selected:
        return None

    formatted = format_secrets(selected)
    encoded = encode_secret(formatted.latest)
    return SecretArtifacts(formatted=formatted, encoded=[encoded])


def run_pipeline(
    captures: Iterable[Any],
    output_dir: Union[str, os.PathLike, Path] = DEFAULT_OUTPUT_DIR,
) -> PipelineResult:
    """Run the pipeline and persist its artifacts.

    An empty selection is not an error: the result carries
    PipelineStatus.NO_REAL_SECRETS and nothing is written.
    """
    artifacts = summarise(captures)
    if artifacts is None:
        return PipelineResult(
            status=PipelineStatus.NO_REAL_SECRETS,
            message=NO_REAL_SECRETS_MESSAGE,
        )

    written = write_artifacts(artifacts, _normalize_path(output_dir))
    return PipelineResult(status=PipelineStatus.OK, artifacts=artifacts, written=written)


def run_pipeline_from_path(
    captures_path: Union[str, os.PathLike, Path],
    output_dir: Union[str, os.PathLike, Path] = DEFAULT_OUTPUT_DIR,
) -> PipelineResult:
    """Replay a saved capture snapshot through the pipeline."""
    captures = load_captures_from_path(_normalize_path(captures_path))
    return run_pipeline(captures, output_dir)


def grab_live(config: Optional[GrabConfig] = None) -> Tuple[CaptureRecord, ...]:
    """Capture secrets from a live page (see secretgrab.adapters.browser)."""
    # Lazy import: playwright is only loaded when a browser is actually needed
    from secretgrab.adapters.browser import grab_live as _grab_live
    return _grab_live(config)


def capture_lines(captures: Iterable[Any]) -> List[str]:
    """One `Secret(<version>): <secret>` line per capture with its own version."""
    lines = []
    for record in read_captures(captures):
        if record.secret is not None and record.version is not None:
            lines.append(f"Secret({int(record.version)}): {record.secret}")
    return lines


def summary_lines(artifacts: SecretArtifacts) -> List[str]:
    """Compact renderings of the four representations, for console output."""
    return [
        compact_dumps([s.model_dump() for s in artifacts.secrets]),
        compact_dumps([s.model_dump() for s in artifacts.secret_bytes]),
        compact_dumps(artifacts.secret_dict),
        compact_dumps([s.model_dump() for s in artifacts.encoded]),
    ]
