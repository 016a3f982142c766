"""Backend utilities for building and executing FFmpeg commands."""

from .builder import build_command
from .executor import ffcleaner, run_job

__all__ = [
    "build_command",
    "ffcleaner",
    "run_job",
]
