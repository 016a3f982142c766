"""Video stream argument helpers."""

from ffcleaner.models.plan import JobPlan

from .stream_args import codec_flag, disable_stream

CODEC: tuple[str, ...] = codec_flag("v")  #: Video codec flag.
TRANSCODE_H264: tuple[str, ...] = (*CODEC, "libx264")  #: Encode video with x264.
PRESET: tuple[str, ...] = ("-preset",)  #: x264 speed/quality preset.
CRF: tuple[str, ...] = ("-crf",)  #: Constant rate factor.
DISABLE: tuple[str, ...] = disable_stream("v")  #: Drop all video streams.


def encode(plan: JobPlan) -> tuple[str, ...]:
    """Return args to re-encode video as H.264 with the chosen preset and CRF."""
    opts = plan.opts.video
    return TRANSCODE_H264 + PRESET + (opts.preset.value,) + CRF + (str(opts.crf),)
