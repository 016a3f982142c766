"""Build and execute FFmpeg commands."""

from __future__ import annotations

import logging
import subprocess
import sys
import time
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter

from ffcleaner.interactive import prompt_options
from ffcleaner.models import JobPlan, Options, RuntimeContext
from ffcleaner.models.verbosity import Verbosity
from ffcleaner.tools import FetchError, download_video, format_size, join_command, probe, run
from ffcleaner.tools.helpers import emit_status, format_action_label, maybe_log_command

from .builder import build_command

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

PROCESSING_FAILED = "Processing failed"

logger = logging.getLogger(__name__)


@dataclass
class FFmpegResult:
    """Result of an FFmpeg execution."""

    success: bool
    error: str = ""
    output: str | None = None


def _ensure_output_parent(path: Path, status_callback: Callable[[str], None] | None) -> None:
    """Create the output parent directory if missing.

    Raises:
        OSError: If the parent exists but is not a directory, or cannot be created.

    """
    parent = path.parent
    if parent.exists():
        if not parent.is_dir():
            raise OSError(f"{PROCESSING_FAILED}: Output directory parent is not a directory: {parent}")
        return
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:  # pragma: no cover - filesystem errors depend on env
        raise OSError(f"{PROCESSING_FAILED}: {e}") from e
    emit_status(f"Created output directory: {parent}", status_callback=status_callback)


def _fetch_source(opts: Options, status_callback: Callable[[str], None] | None) -> Path | None:
    """Download the remote source, if the options name one."""
    url = opts.remote_url
    if url is None:
        return None
    emit_status("URL provided. Downloading...", status_callback=status_callback)
    return download_video(url, status_callback=status_callback, verbose=opts.runtime.verbose)


def execute_ffmpeg(
    plan: JobPlan,
    args: tuple[str, ...],
    output: str,
    *,
    status_callback: Callable[[str], None] | None = None,
) -> FFmpegResult:
    """Execute an FFmpeg command and return its result."""
    runtime = plan.opts.runtime
    try:
        run(
            plan.ffmpeg,
            args,
            verbose=runtime.verbose,
            status_callback=status_callback,
            list_cmd=runtime.verbosity >= Verbosity.COMMANDS,
        )
    except subprocess.CalledProcessError as e:
        return FFmpegResult(success=False, error=f"{PROCESSING_FAILED}: FFmpeg exited with status {e.returncode}")
    except OSError as e:
        return FFmpegResult(success=False, error=f"{PROCESSING_FAILED}: {e!s}")
    return FFmpegResult(success=True, output=output)


def report_summary(plan: JobPlan, elapsed: float, status_callback: Callable[[str], None] | None) -> None:
    """Print the output location and basic statistics for a finished job."""
    output = plan.output_path
    emit_status("Done!", status_callback=status_callback)
    emit_status(f"Output: {output.absolute()}", status_callback=status_callback)
    emit_status(f"Time taken: {elapsed:.1f}s", status_callback=status_callback)
    info = probe.get_media_info(plan.ctx, plan.ffprobe, str(output))
    size = info.size_bytes if info else None
    if size is None and output.is_file():
        size = output.stat().st_size
    if size is not None:
        emit_status(f"Size: {format_size(size)}", status_callback=status_callback)
    if info and info.duration_sec is not None:
        emit_status(f"Duration: {info.duration_sec:.2f}s", status_callback=status_callback)


def run_job(
    opts: Options,
    status_callback: Callable[[str], None] | None = None,
) -> tuple[tuple[str, ...], FFmpegResult]:
    """Fetch, plan, build, and optionally execute an FFmpeg command.

    Returns the command that was (or would be) run and its result. Every
    failure is reported through the result; nothing is raised.
    """
    with RuntimeContext(
        verbosity=opts.runtime.verbosity,
        dry_run=opts.runtime.dry_run,
        status_callback=status_callback,
    ) as ctx:
        try:
            source = _fetch_source(opts, status_callback)
            plan = JobPlan.from_options(opts, ctx, source=source)
        except FetchError as e:
            return (), FFmpegResult(success=False, error=f"Error downloading video: {e}")
        except ValueError as e:
            return (), FFmpegResult(success=False, error=f"Error: {e}")

        args, output = build_command(plan)
        if opts.runtime.dry_run:
            maybe_log_command(
                verbosity=opts.runtime.verbosity,
                dry_run=True,
                status_callback=status_callback,
                banner=f"{format_action_label(dry_run=True)}: {join_command(plan.ffmpeg, args)}",
            )
            return args, FFmpegResult(success=True, output=output)

        try:
            _ensure_output_parent(plan.output_path, status_callback)
        except OSError as e:
            return args, FFmpegResult(success=False, error=str(e))

        emit_status(f"Mode: {plan.operation.label}...", status_callback=status_callback)
        logger.debug("Running %s", join_command(plan.ffmpeg, args))
        started = time.monotonic()
        result = execute_ffmpeg(plan, args, output, status_callback=status_callback)
        if result.success:
            report_summary(plan, time.monotonic() - started, status_callback)
        return args, result


def ffcleaner(
    opts: Options | None = None,
    status_callback: Annotated[Callable[[str], None] | None, Parameter(parse=False)] = None,  # type: ignore[call-arg]
) -> int:
    """Trim, mute, or extract audio from a video with FFmpeg.

    Run without a source or URL to be prompted interactively.
    """
    status_func = print if status_callback is None else status_callback
    opts = opts or Options()
    err_func = partial(print, file=sys.stderr, flush=True) if status_callback is None else status_callback
    if not opts.has_input:
        emit_status("No input file provided via flags. Entering Interactive Mode...", status_callback=status_func)
        try:
            opts = prompt_options(opts)
        except ValueError as e:
            err_func(f"Error: {e}")
            return 1
    _, result = run_job(opts, status_callback=status_func)
    if not result.success:
        err_func(result.error)
        return 1
    return 0


__all__ = ["PROCESSING_FAILED", "FFmpegResult", "execute_ffmpeg", "ffcleaner", "report_summary", "run_job"]
