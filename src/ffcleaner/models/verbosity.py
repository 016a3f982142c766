"""Verbosity levels for status output."""

from enum import IntEnum


class Verbosity(IntEnum):
    """How much of the FFmpeg run is shown to the user.

    ``QUIET`` mirrors only the error stream, ``COMMANDS`` also prints the
    command lines, and ``OUTPUT`` mirrors both FFmpeg streams.
    """

    QUIET = 0
    COMMANDS = 1
    OUTPUT = 2


__all__ = ["Verbosity"]
