"""FFmpeg-related helper utilities."""

from . import probe
from .binaries import FFMPEG, FFPROBE, resolve_binary
from .cli import join_command, run
from .fetch import FetchError, download_video, is_remote
from .helpers import emit_status, format_size, format_time, parse_timestamp

__all__ = [
    "FFMPEG",
    "FFPROBE",
    "FetchError",
    "download_video",
    "emit_status",
    "format_size",
    "format_time",
    "is_remote",
    "join_command",
    "parse_timestamp",
    "probe",
    "resolve_binary",
    "run",
]
