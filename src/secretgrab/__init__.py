"""secretgrab: runtime secret capture + deterministic multi-format encoding."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("secretgrab")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
# Note: grab_live is exported from secretgrab.api, not from root
# This keeps `import secretgrab` free of the playwright import
from secretgrab.api import summarise, run_pipeline, PipelineResult
from secretgrab.kernel.models import SecretArtifacts
from secretgrab.codes import PipelineStatus

__all__ = [
    "__version__",
    "summarise",
    "run_pipeline",
    "PipelineResult",
    "PipelineStatus",
    "SecretArtifacts",
]
