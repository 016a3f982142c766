"""Encoder and output format type definitions."""

from enum import Enum


class Preset(str, Enum):
    """x264 speed/quality presets, passed to FFmpeg unmodified."""

    ULTRAFAST = "ultrafast"
    SUPERFAST = "superfast"
    VERYFAST = "veryfast"
    FASTER = "faster"
    FAST = "fast"
    MEDIUM = "medium"
    SLOW = "slow"
    SLOWER = "slower"
    VERYSLOW = "veryslow"
    PLACEBO = "placebo"


class Operation(str, Enum):
    """What a job does with the source video."""

    CLEAN = "clean"  # trim and/or mute, re-encoded as H.264/AAC
    EXTRACT_AUDIO = "extract-audio"

    @property
    def label(self) -> str:
        """Short human label used in status lines."""
        return "Processing (Cut/Mute)" if self is Operation.CLEAN else "Extracting MP3"


__all__ = ["Operation", "Preset"]
