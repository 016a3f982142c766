"""Options package exports."""

from __future__ import annotations

from ffcleaner.models.verbosity import Verbosity

from .audio import AudioOptions
from .defaults import (
    AUDIO_EXTENSION,
    CLEANED_SUFFIX,
    DEFAULT_AUDIO_KBPS,
    DEFAULT_CRF,
    DEFAULT_PRESET,
    MP3_QUALITY,
    MUTED_SUFFIX,
)
from .options import Options
from .runtime import RuntimeOptions
from .time import MuteOptions, TimeOptions
from .video import VideoOptions

__all__ = [
    "AUDIO_EXTENSION",
    "CLEANED_SUFFIX",
    "DEFAULT_AUDIO_KBPS",
    "DEFAULT_CRF",
    "DEFAULT_PRESET",
    "MP3_QUALITY",
    "MUTED_SUFFIX",
    "AudioOptions",
    "MuteOptions",
    "Options",
    "RuntimeOptions",
    "TimeOptions",
    "Verbosity",
    "VideoOptions",
]
