"""Job planning models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ffcleaner.tools import FFMPEG, FFPROBE, emit_status, probe, resolve_binary

from .options import AUDIO_EXTENSION, CLEANED_SUFFIX, MUTED_SUFFIX, Options
from .types import Operation

MISSING_TOOLS = (
    "ffmpeg or ffprobe not found in a 'bin' folder or on the system PATH. "
    "Install FFmpeg or place the binaries in a 'bin' folder next to the application."
)

if TYPE_CHECKING:
    from .context import RuntimeContext


@dataclass(frozen=True, slots=True)
class JobPlan:
    """Execution plan resolved from user options.

    ``source`` is always a local file; any URL has been downloaded before the
    plan is built.
    """

    opts: Options
    ctx: RuntimeContext
    ffmpeg: str
    ffprobe: str
    source: Path
    output_path: Path
    operation: Operation
    start_sec: float | None
    end_sec: float | None
    mute_start_sec: float | None
    mute_end_sec: float | None

    @property
    def need_trim(self) -> bool:
        """Whether the source is clipped."""
        return self.start_sec is not None or self.end_sec is not None

    @property
    def need_mute(self) -> bool:
        """Whether an audio section is silenced."""
        return self.mute_start_sec is not None and self.mute_end_sec is not None

    @classmethod
    def from_options(cls, opts: Options, ctx: RuntimeContext, *, source: Path | None = None) -> JobPlan:
        """Create a plan from validated options.

        Args:
            opts: User options.
            ctx: Runtime context for probing and status output.
            source: Local file to process, overriding ``opts.source``. Used
                after a remote video has been downloaded.

        Raises:
            ValueError: If the input is missing or not a file, or FFmpeg
                cannot be found.

        """
        src = _validate_source(source if source is not None else opts.source)
        ffmpeg, ffprobe = _ensure_tools()

        operation = opts.operation
        mute_start = opts.mute.start_sec if operation is Operation.CLEAN else None
        mute_end = opts.mute.end_sec if operation is Operation.CLEAN else None
        plan = cls(
            opts=opts,
            ctx=ctx,
            ffmpeg=ffmpeg,
            ffprobe=ffprobe,
            source=src,
            output_path=derive_output_path(src, opts.output, operation, muted=mute_start is not None),
            operation=operation,
            start_sec=opts.time.start_sec,
            end_sec=opts.time.end_sec,
            mute_start_sec=mute_start,
            mute_end_sec=mute_end,
        )
        _warn_out_of_range(plan)
        return plan


def _validate_source(source: Path | str | None) -> Path:
    """Return ``source`` as an absolute path to an existing file."""
    if source is None:
        raise ValueError("Input file or URL required.")
    path = Path(source).expanduser().absolute()
    if not path.exists():
        raise ValueError(f"Input file '{path}' does not exist.")
    if path.is_dir():
        raise ValueError(f"Input '{path}' is a directory. Please specify a video file.")
    return path


def _ensure_tools() -> tuple[str, str]:
    """Resolve ``ffmpeg`` and ``ffprobe``; both are required."""
    ffmpeg = resolve_binary(FFMPEG)
    ffprobe = resolve_binary(FFPROBE)
    if not ffmpeg or not ffprobe:
        raise ValueError(MISSING_TOOLS)
    return ffmpeg, ffprobe


def _warn_out_of_range(plan: JobPlan) -> None:
    """Warn when requested times lie past the end of the source."""
    times = [t for t in (plan.start_sec, plan.end_sec, plan.mute_start_sec, plan.mute_end_sec) if t is not None]
    if not times or plan.ctx.dry_run:
        return
    duration = probe.get_duration_sec(plan.ctx, plan.ffprobe, str(plan.source))
    if duration is None:
        return
    latest = max(times)
    if latest > duration:
        emit_status(
            f"Warning: requested time {latest:.3f}s is past the end of the source ({duration:.3f}s).",
            status_callback=plan.ctx.status_callback,
        )


def derive_output_path(source: Path, output: Path | None, operation: Operation, *, muted: bool = False) -> Path:
    """Derive the output path from the source, an explicit output, and the operation.

    Video jobs default to ``<stem>_cleaned<ext>`` (plus ``_muted`` when a
    section is muted) next to the source. Audio extraction defaults to
    ``<stem>.mp3`` and forces an ``.mp3`` extension onto explicit outputs.
    """
    if operation is Operation.EXTRACT_AUDIO:
        if output is None:
            return source.with_name(f"{source.stem}{AUDIO_EXTENSION}")
        p = Path(output).expanduser().absolute()
        if p.suffix.lower() != AUDIO_EXTENSION:
            p = p.with_name(f"{p.name}{AUDIO_EXTENSION}")
        return p

    if output is not None:
        return Path(output).expanduser().absolute()
    suffix = CLEANED_SUFFIX + (MUTED_SUFFIX if muted else "")
    return source.with_name(f"{source.stem}{suffix}{source.suffix}")


__all__ = ["MISSING_TOOLS", "JobPlan", "derive_output_path"]
