"""Stream argument helpers."""


def codec_flag(kind: str) -> tuple[str, ...]:
    """Return codec flag for a stream type (``v`` or ``a``)."""
    return (f"-c:{kind}",)


def bitrate_flag(kind: str) -> tuple[str, ...]:
    """Return bitrate flag for a stream type."""
    return (f"-b:{kind}",)


def quality_flag(kind: str) -> tuple[str, ...]:
    """Return the variable-bitrate quality flag for a stream type."""
    return (f"-q:{kind}",)


def disable_stream(kind: str) -> tuple[str, ...]:
    """Return flag to drop all streams of a type."""
    return (f"-{kind}n",)
