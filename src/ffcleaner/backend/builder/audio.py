"""Audio stream argument helpers."""

from ffcleaner.models.options import MP3_QUALITY
from ffcleaner.models.plan import JobPlan

from .stream_args import bitrate_flag, codec_flag, quality_flag

CODEC: tuple[str, ...] = codec_flag("a")  #: Audio codec flag.
TRANSCODE_AAC: tuple[str, ...] = (*CODEC, "aac")  #: Encode audio to AAC.
TRANSCODE_MP3: tuple[str, ...] = (*CODEC, "libmp3lame")  #: Encode audio to MP3.
BITRATE: tuple[str, ...] = bitrate_flag("a")  #: Target audio bitrate.
QUALITY: tuple[str, ...] = quality_flag("a")  #: Variable bitrate quality.
FILTER: tuple[str, ...] = ("-af",)  #: Audio filter graph.


def mute_filter(start_sec: float, end_sec: float) -> str:
    """Return a filter that silences audio between two source offsets."""
    return f"volume=0:enable='between(t,{start_sec:.3f},{end_sec:.3f})'"


def filters(plan: JobPlan) -> tuple[str, ...]:
    """Return the ``-af`` arguments for the plan, if any."""
    chain: list[str] = []
    if plan.mute_start_sec is not None and plan.mute_end_sec is not None:
        chain.append(mute_filter(plan.mute_start_sec, plan.mute_end_sec))
    if not chain:
        return ()
    return (*FILTER, ",".join(chain))


def encode(plan: JobPlan) -> tuple[str, ...]:
    """Return args to encode audio as AAC alongside re-encoded video."""
    return TRANSCODE_AAC + BITRATE + (f"{plan.opts.audio.kbps}k",)


def extract() -> tuple[str, ...]:
    """Return args to encode the audio track as high quality VBR MP3."""
    return TRANSCODE_MP3 + QUALITY + (str(MP3_QUALITY),)
