"""Dataclasses for ffprobe outputs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MediaInfo:
    """Container-level metadata for a media file."""

    duration_sec: float | None = None
    size_bytes: int | None = None


__all__ = ["MediaInfo"]
