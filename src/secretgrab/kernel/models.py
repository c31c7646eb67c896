"""Pydantic models for selected, formatted and encoded secrets.

Field order is serialization order: every artifact entry renders as
{"version": ..., "secret": ...}.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Secret(BaseModel):
    """A selected secret for one version."""
    version: int = Field(..., gt=0)
    secret: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class SecretBytes(BaseModel):
    """A secret expanded to its code points, one integer per character."""
    version: int = Field(..., gt=0)
    secret: List[int]

    model_config = ConfigDict(frozen=True, extra="forbid")


class SecretBase32(BaseModel):
    """The encoder's output for the latest version."""
    version: int = Field(..., gt=0)
    secret: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class FormattedSecrets(BaseModel):
    """Canonical representations of a selection, ascending by version."""
    secrets: List[Secret]
    secret_bytes: List[SecretBytes]
    secret_dict: Dict[str, List[int]]  # str(version) -> code points, ascending insertion order

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def latest(self) -> SecretBytes:
        """The maximum-version entry (last after the ascending sort)."""
        return self.secret_bytes[-1]


class SecretArtifacts(BaseModel):
    """Everything one pipeline run emits."""
    formatted: FormattedSecrets
    encoded: List[SecretBase32]  # exactly one entry

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def secrets(self) -> List[Secret]:
        return self.formatted.secrets

    @property
    def secret_bytes(self) -> List[SecretBytes]:
        return self.formatted.secret_bytes

    @property
    def secret_dict(self) -> Dict[str, List[int]]:
        return self.formatted.secret_dict
