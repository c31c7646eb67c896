"""Artifact sink: renders and persists the four secret artifacts (internal)."""

from pathlib import Path
from typing import Dict, Union

from secretgrab._internal.canonical_json import compact_dumps, pretty_dumps
from secretgrab.kernel.models import SecretArtifacts

SECRETS_FILENAME = "secrets.json"
SECRET_BYTES_FILENAME = "secretBytes.json"
SECRET_DICT_FILENAME = "secretDict.json"
SECRET_BASE32_FILENAME = "secretBase32.json"

ARTIFACT_FILENAMES = (
    SECRETS_FILENAME,
    SECRET_BYTES_FILENAME,
    SECRET_DICT_FILENAME,
    SECRET_BASE32_FILENAME,
)

DEFAULT_OUTPUT_DIR = Path("secrets")


def render_artifacts(artifacts: SecretArtifacts) -> Dict[str, str]:
    """Render every artifact to its file content, keyed by filename."""
    return {
        SECRETS_FILENAME: pretty_dumps([s.model_dump() for s in artifacts.secrets]),
        SECRET_BYTES_FILENAME: compact_dumps([s.model_dump() for s in artifacts.secret_bytes]),
        SECRET_DICT_FILENAME: compact_dumps(artifacts.secret_dict),
        SECRET_BASE32_FILENAME: compact_dumps([s.model_dump() for s in artifacts.encoded]),
    }


def write_artifacts(artifacts: SecretArtifacts, output_dir: Union[str, Path]) -> Dict[str, Path]:
    """Write all four artifacts into output_dir, creating it if needed.

    Every artifact is encoded before the directory is touched, so an
    unencodable artifact leaves nothing behind.

    Returns:
        Mapping of filename -> written path, in artifact order
    """
    encoded = {
        filename: (content + "\n").encode("utf-8")
        for filename, content in render_artifacts(artifacts).items()
    }

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}
    for filename, data in encoded.items():
        path = out / filename
        path.write_bytes(data)
        written[filename] = path
    return written
