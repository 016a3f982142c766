"""Common FFmpeg command arguments."""

INPUT_FLAG: tuple[str, ...] = ("-i",)  #: Introduce an input file path.
OVERWRITE_OUTPUT: tuple[str, ...] = ("-y",)  #: Overwrite existing files.
HIDE_BANNER: tuple[str, ...] = ("-hide_banner",)  #: Skip the build/version banner.
