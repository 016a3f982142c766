"""Top-level option model for a cleaning job."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ffcleaner.models.types import Operation
from ffcleaner.tools import is_remote

from .audio import AudioOptions
from .groups import OUTPUT_GROUP, SOURCE_GROUP
from .runtime import RuntimeOptions
from .time import MuteOptions, TimeOptions
from .video import VideoOptions


@Parameter(name="*")
class Options(BaseModel):
    """Options for trimming, muting, or extracting audio from a video."""

    source: Annotated[
        str | None,
        Parameter(group=SOURCE_GROUP, alias="-i"),
    ] = Field(
        None,
        description="Path to the source video. A URL here is downloaded first. Prompts interactively when omitted.",
    )
    url: Annotated[
        str | None,
        Parameter(group=SOURCE_GROUP),
    ] = Field(None, description="URL of a remote video to download and process.")
    output: Annotated[
        Path | None,
        Parameter(group=OUTPUT_GROUP, alias="-o"),
    ] = Field(
        default=None,
        description="Path for the output file. Defaults to '<name>_cleaned' next to the source, or '<name>.mp3'.",
    )
    time: TimeOptions = Field(default_factory=TimeOptions)
    mute: MuteOptions = Field(default_factory=MuteOptions)
    video: VideoOptions = Field(default_factory=VideoOptions)
    audio: AudioOptions = Field(default_factory=AudioOptions)
    runtime: RuntimeOptions = Field(default_factory=RuntimeOptions)

    model_config = ConfigDict(extra="forbid")

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: str | None) -> str | None:
        """Normalize blank sources to ``None``; existence is checked when planning."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """Accept only http(s) or ``www.`` URLs."""
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not is_remote(v):
            raise ValueError(f"Not a URL: {v}")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: Path | None) -> Path | None:
        """Expand ``~`` in the output path."""
        if v is None or not str(v).strip():
            return None
        return Path(v).expanduser()

    @model_validator(mode="after")
    def validate_mute_with_extract(self) -> Options:
        """A mute window only applies when re-encoding video."""
        if self.audio.extract and self.mute.is_set:
            raise ValueError("Cannot mute a section while extracting audio")
        return self

    @property
    def operation(self) -> Operation:
        """The operation these options describe."""
        return Operation.EXTRACT_AUDIO if self.audio.extract else Operation.CLEAN

    @property
    def has_input(self) -> bool:
        """Whether a source path or URL was supplied."""
        return self.source is not None or self.url is not None

    @property
    def remote_url(self) -> str | None:
        """The URL to download before processing, if any."""
        if self.url is not None:
            return self.url
        if self.source is not None and is_remote(self.source):
            return self.source
        return None


__all__ = ["Options"]
