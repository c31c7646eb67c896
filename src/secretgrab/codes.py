"""Status code constants for secretgrab.api.run_pipeline().

These constants prevent stringly-typed statuses and ensure client code
checks for the correct outcome.
"""

from enum import Enum


class PipelineStatus(str, Enum):
    """Outcome of one pipeline run."""

    # Artifacts produced
    OK = "OK"

    # Non-fatal: no capture carried a string secret with a positive version
    NO_REAL_SECRETS = "NO_REAL_SECRETS"
