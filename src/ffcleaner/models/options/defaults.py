"""Default constants for option models."""

from __future__ import annotations

from ffcleaner.models.types import Preset

DEFAULT_PRESET = Preset.MEDIUM
DEFAULT_CRF = 23
MAX_CRF = 51
DEFAULT_AUDIO_KBPS = 192
MP3_QUALITY = 2  # libmp3lame VBR scale, 0 is best
CLEANED_SUFFIX = "_cleaned"
MUTED_SUFFIX = "_muted"
AUDIO_EXTENSION = ".mp3"

__all__ = [
    "AUDIO_EXTENSION",
    "CLEANED_SUFFIX",
    "DEFAULT_AUDIO_KBPS",
    "DEFAULT_CRF",
    "DEFAULT_PRESET",
    "MAX_CRF",
    "MP3_QUALITY",
    "MUTED_SUFFIX",
]
