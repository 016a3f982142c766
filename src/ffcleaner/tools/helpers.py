"""Utility functions for time parsing and status emission."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

from pytimeparse2 import parse as parse_duration

from ffcleaner.models.verbosity import Verbosity

logger = logging.getLogger(__name__)


def parse_timestamp(s: str) -> float:
    """Convert a time expression to seconds.

    Args:
        s: Plain seconds such as ``"90"`` or ``"12.5"``, a clock value such as
            ``"01:30"`` or ``"01:00:00"``, or a timespan such as ``"1m30s"``.

    Returns:
        The time in seconds.

    Raises:
        ValueError: If ``s`` is empty, cannot be parsed, or is negative.

    """
    text = s.strip()
    if not text:
        raise ValueError("Empty timestamp")
    # Python numeric literals like ``1_0`` are not times.
    parsed = None if "_" in text else parse_duration(text)
    if parsed is None:
        raise ValueError(f"Unable to parse timestamp: {s}")
    seconds = float(parsed)
    if seconds < 0 or not math.isfinite(seconds):
        raise ValueError(f"Timestamp must be a non-negative number of seconds: {s}")
    return seconds


def format_time(seconds: float, *, places: int = 3) -> str:
    """Format seconds as ``HH:MM:SS.F`` with configurable precision."""
    seconds = round(seconds, places)

    h, remainder = divmod(seconds, 3600)
    m, s = divmod(remainder, 60)
    return f"{int(h):02d}:{int(m):02d}:{s:0{2 + 1 + places}.{places}f}"


def format_size(num_bytes: int) -> str:
    """Return a short human readable size such as ``12.3 MB``."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    size = float(num_bytes)
    unit = "KB"
    for unit in ("KB", "MB", "GB"):
        size /= 1024
        if size < 1024:
            break
    return f"{size:.1f} {unit}"


def emit_status(message: str, *, status_callback: Callable[[str], None] | None) -> None:
    """Send ``message`` to the CLI, logger, or a custom callback.

    The caller controls where status lines go:

    * ``print`` - used by the CLI for direct terminal updates.
    * ``None`` - route messages through ``logger.info``.
    * Any other ``Callable[[str], None]`` - for tests that capture status
      output.
    """
    if status_callback is None:
        logger.info(message)
        return
    # Carriage-return lines (FFmpeg progress) are redrawn in place.
    if status_callback is print:
        print(  # noqa: T201
            message,
            end="" if "\r" in message and "\n" not in message else "\n",
            flush=True,
        )
        return
    status_callback(message)


def format_action_label(*, dry_run: bool, cached: bool = False) -> str:
    """Return a short action label for command banners."""
    if cached:
        return "Cached"
    if dry_run:
        return "Command"
    return "Running"


def maybe_log_command(
    *,
    verbosity: Verbosity,
    dry_run: bool,
    status_callback: Callable[[str], None] | None,
    banner: str,
) -> None:
    """Log a command banner at ``Verbosity.COMMANDS`` or in dry-run mode."""
    if verbosity >= Verbosity.COMMANDS or dry_run:
        emit_status(banner, status_callback=status_callback)


__all__ = [
    "emit_status",
    "format_action_label",
    "format_size",
    "format_time",
    "maybe_log_command",
    "parse_timestamp",
]
