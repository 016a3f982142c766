"""Trim, mute, or extract audio from videos with FFmpeg."""

from .backend import build_command, ffcleaner, run_job
from .models import Options

__all__ = ["Options", "build_command", "ffcleaner", "run_job"]
