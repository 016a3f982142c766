"""ffprobe helpers."""

from __future__ import annotations

import json
import logging
import subprocess

from ffcleaner.models.context import RuntimeContext
from ffcleaner.models.ffprobe import MediaInfo
from ffcleaner.models.verbosity import Verbosity

from .cli import cache_key, capture, join_command
from .helpers import emit_status, format_action_label

_QUIET = ["-v", "error"]
_JSON_OUTPUT = ["-of", "json"]
_SHOW_FORMAT = ["-show_entries", "format=duration,size"]

logger = logging.getLogger(__name__)


def _log_cmd(ctx: RuntimeContext, ffprobe: str, cmd: list[str], *, cached: bool = False) -> None:
    """Log an ffprobe command banner when commands are being shown."""
    if ctx.verbosity < Verbosity.COMMANDS:
        return
    action = format_action_label(dry_run=False, cached=cached)
    emit_status(f"{action}: {join_command(ffprobe, cmd)}", status_callback=ctx.status_callback)


def run(ctx: RuntimeContext, ffprobe: str, cmd: list[str]) -> str | None:
    """Run ``ffprobe`` with ``cmd`` and return stripped output or ``None``.

    Successful results are cached per command and input file metadata, so a
    file modified in place is probed again.
    """
    key = cache_key(["ffprobe", *cmd])
    cached = ctx.cache.get(key)
    if isinstance(cached, str):
        _log_cmd(ctx, ffprobe, cmd, cached=True)
        return cached
    _log_cmd(ctx, ffprobe, cmd)
    try:
        out = capture(ffprobe, cmd).strip()
    except (subprocess.CalledProcessError, OSError) as exc:
        logger.warning("ffprobe command failed: %s", join_command(ffprobe, cmd), exc_info=exc)
        return None
    ctx.cache[key] = out
    return out


def get_media_info(ctx: RuntimeContext, ffprobe: str, path: str) -> MediaInfo | None:
    """Return duration and size for ``path`` or ``None`` if it cannot be probed."""
    out = run(ctx, ffprobe, [*_QUIET, *_SHOW_FORMAT, *_JSON_OUTPUT, path])
    if not out:
        return None
    try:
        fmt = json.loads(out).get("format", {})
    except json.JSONDecodeError:
        logger.warning("Unexpected ffprobe output for %s: %r", path, out)
        return None
    duration = fmt.get("duration")
    size = fmt.get("size")
    try:
        return MediaInfo(
            duration_sec=float(duration) if duration is not None else None,
            size_bytes=int(size) if size is not None else None,
        )
    except ValueError:
        logger.warning("Unexpected ffprobe values for %s: %r", path, fmt)
        return None


def get_duration_sec(ctx: RuntimeContext, ffprobe: str, path: str) -> float | None:
    """Return the container duration of ``path`` in seconds."""
    info = get_media_info(ctx, ffprobe, path)
    return info.duration_sec if info else None


__all__ = ["get_duration_sec", "get_media_info", "run"]
