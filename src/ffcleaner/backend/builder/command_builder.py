"""Build FFmpeg command arguments from a job plan."""

from ffcleaner.models import Operation
from ffcleaner.models.plan import JobPlan

from . import audio, trim, video
from .command_args import HIDE_BANNER, INPUT_FLAG, OVERWRITE_OUTPUT

GLOBAL_FLAGS: tuple[str, ...] = HIDE_BANNER + OVERWRITE_OUTPUT


def _clean_args(plan: JobPlan) -> tuple[str, ...]:
    """Return stream args for a trim/mute job."""
    return video.encode(plan) + audio.encode(plan) + audio.filters(plan)


def _extract_args() -> tuple[str, ...]:
    """Return stream args for audio extraction."""
    return video.DISABLE + audio.extract()


def build_command(plan: JobPlan) -> tuple[tuple[str, ...], str]:
    """Return FFmpeg arguments and the expected output path."""
    stream_args = _extract_args() if plan.operation is Operation.EXTRACT_AUDIO else _clean_args(plan)
    args = (
        GLOBAL_FLAGS
        + trim.build(plan)
        + INPUT_FLAG
        + (str(plan.source),)
        + stream_args
        + (str(plan.output_path),)
    )
    return args, str(plan.output_path)


__all__ = ["GLOBAL_FLAGS", "build_command"]
