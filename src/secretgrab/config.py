"""Run configuration for live capture."""

from pathlib import Path
from typing import Tuple
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TARGET_URL = "https://open.spotify.com"
DEFAULT_SETTLE_SECONDS = 3.0
DEFAULT_TIMEOUT_SECONDS = 45.0
DEFAULT_LAUNCH_ARGS: Tuple[str, ...] = (
    "--disable-blink-features=AutomationControlled",
    "--no-sandbox",
    "--disable-setuid-sandbox",
)


class GrabConfig(BaseModel):
    """Settings for one live capture run."""
    target_url: str = DEFAULT_TARGET_URL
    settle_seconds: float = Field(DEFAULT_SETTLE_SECONDS, ge=0, description="Delay after navigation before reading captures")
    timeout_seconds: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0, description="Navigation and evaluation timeout")
    headless: bool = True
    output_dir: Path = Path("secrets")
    launch_args: Tuple[str, ...] = DEFAULT_LAUNCH_ARGS

    model_config = ConfigDict(extra="forbid")

    @field_validator('target_url')
    @classmethod
    def validate_target_url(cls, v: str) -> str:
        """Only http(s) targets can be navigated to."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Target URL '{v}' must be an absolute http(s) URL")
        return v

    @property
    def timeout_ms(self) -> int:
        return int(self.timeout_seconds * 1000)

    @property
    def settle_ms(self) -> float:
        return self.settle_seconds * 1000
