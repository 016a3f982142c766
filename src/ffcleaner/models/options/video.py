"""Video encoding option models."""

from __future__ import annotations

from cyclopts import Parameter
from pydantic import BaseModel, Field

from ffcleaner.models.types import Preset

from .defaults import DEFAULT_CRF, DEFAULT_PRESET, MAX_CRF
from .groups import VIDEO_GROUP


@Parameter(group=VIDEO_GROUP)
class VideoOptions(BaseModel):
    """Options for H.264 re-encoding."""

    preset: Preset = Field(DEFAULT_PRESET, description="x264 encoding preset.")
    crf: int = Field(
        DEFAULT_CRF,
        ge=0,
        le=MAX_CRF,
        description=f"Constant rate factor; lower is better quality. Range 0-{MAX_CRF}.",
    )


__all__ = ["VideoOptions"]
