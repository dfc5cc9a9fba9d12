"""Launch configuration model for chromerunner."""

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from chromerunner.constants import DEFAULT_WINDOW_SIZE

_WINDOW_SIZE_RE = re.compile(r"\s*(\d+)\s*[,xX]\s*(\d+)\s*")


class LaunchConfig(BaseModel):
    """Everything needed for one launch. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    script_path: Path
    headless: bool = False
    detached: bool = False
    html_template: str | None = None
    window_size: str = DEFAULT_WINDOW_SIZE
    marker_timeout: float | None = None

    @field_validator("window_size")
    @classmethod
    def _normalise_window_size(cls, value: str) -> str:
        match = _WINDOW_SIZE_RE.fullmatch(value)
        if match is None:
            raise ValueError(f"window size must look like WIDTH,HEIGHT (got {value!r})")
        width, height = int(match.group(1)), int(match.group(2))
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive (got {value!r})")
        return f"{width},{height}"

    @field_validator("marker_timeout")
    @classmethod
    def _check_marker_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("marker timeout must be greater than zero")
        return value
