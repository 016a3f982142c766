"""Audio option models."""

from __future__ import annotations

from cyclopts import Parameter
from pydantic import BaseModel, Field

from .defaults import DEFAULT_AUDIO_KBPS
from .groups import AUDIO_GROUP


@Parameter(group=AUDIO_GROUP)
class AudioOptions(BaseModel):
    """Options for audio handling."""

    extract: bool = Field(default=False, description="Extract the audio track to an MP3 file instead of a video.")
    kbps: int = Field(
        DEFAULT_AUDIO_KBPS,
        gt=0,
        description="AAC bitrate in kilobits per second when re-encoding video.",
    )


__all__ = ["AudioOptions"]
