"""FFmpeg command builder."""

from .command_builder import build_command

__all__ = ["build_command"]
