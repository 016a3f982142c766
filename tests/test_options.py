"""Tests for option validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from ffcleaner.models import Operation, Options, Preset
from ffcleaner.models.options import (
    DEFAULT_CRF,
    DEFAULT_PRESET,
    AudioOptions,
    MuteOptions,
    RuntimeOptions,
    TimeOptions,
    VideoOptions,
)
from ffcleaner.models.verbosity import Verbosity


def test_defaults() -> None:
    """Options without flags describe an interactive, re-encoding job."""
    opts = Options()
    assert not opts.has_input
    assert opts.operation is Operation.CLEAN
    assert opts.video.preset is DEFAULT_PRESET
    assert opts.video.crf == DEFAULT_CRF
    assert opts.runtime.verbosity is Verbosity.QUIET


def test_blank_source_is_none() -> None:
    """Whitespace-only sources count as missing."""
    assert Options(source="  ").source is None


def test_time_strings_are_validated() -> None:
    """Unparseable times are rejected when options are built."""
    with pytest.raises(ValidationError):
        TimeOptions(start="soon")


def test_time_seconds() -> None:
    """Clip boundaries are exposed in seconds."""
    opts = TimeOptions(start="00:01:30", end="120")
    assert opts.start_sec == 90.0
    assert opts.end_sec == 120.0
    assert opts.is_set


def test_end_must_follow_start() -> None:
    """Reject an empty or reversed clip."""
    with pytest.raises(ValidationError):
        TimeOptions(start="10", end="10")
    with pytest.raises(ValidationError):
        TimeOptions(start="20", end="00:00:10")


def test_mute_requires_both_ends() -> None:
    """A mute window needs a start and an end."""
    with pytest.raises(ValidationError):
        MuteOptions(start="00:06:00")
    with pytest.raises(ValidationError):
        MuteOptions(end="00:06:30")


def test_mute_window_order() -> None:
    """The mute window must have positive length."""
    with pytest.raises(ValidationError):
        MuteOptions(start="00:06:30", end="00:06:00")
    window = MuteOptions(start="00:06:00", end="00:06:30")
    assert (window.start_sec, window.end_sec) == (360.0, 390.0)


def test_mute_conflicts_with_extract() -> None:
    """Muting makes no sense when only audio is extracted."""
    with pytest.raises(ValidationError):
        Options(
            source="a.mp4",
            mute=MuteOptions(start="1", end="2"),
            audio=AudioOptions(extract=True),
        )


def test_extract_operation() -> None:
    """The audio extraction flag selects the extract operation."""
    assert Options(source="a.mp4", audio=AudioOptions(extract=True)).operation is Operation.EXTRACT_AUDIO


@pytest.mark.parametrize("crf", [-1, 52])
def test_crf_range(crf: int) -> None:
    """CRF outside 0-51 is rejected."""
    with pytest.raises(ValidationError):
        VideoOptions(crf=crf)


def test_preset_from_string() -> None:
    """Presets parse from their FFmpeg names."""
    assert VideoOptions(preset="veryfast").preset is Preset.VERYFAST
    with pytest.raises(ValidationError):
        VideoOptions(preset="warp")


@pytest.mark.parametrize(
    ("value", "expected"),
    [("output", Verbosity.OUTPUT), ("1", Verbosity.COMMANDS), (0, Verbosity.QUIET)],
)
def test_verbosity_parsing(value: object, expected: Verbosity) -> None:
    """Verbosity accepts names and numbers."""
    assert RuntimeOptions(verbosity=value).verbosity is expected


def test_url_must_be_remote() -> None:
    """The url option rejects plain paths."""
    with pytest.raises(ValidationError):
        Options(url="clip.mp4")
    assert Options(url="https://example.com/v").remote_url == "https://example.com/v"


def test_source_url_is_remote() -> None:
    """A URL typed as the source is downloaded like --url."""
    assert Options(source="www.youtube.com/watch?v=x").remote_url == "www.youtube.com/watch?v=x"
    assert Options(source="clip.mp4").remote_url is None


def test_output_expands_user() -> None:
    """``~`` in the output path is expanded."""
    opts = Options(source="a.mp4", output=Path("~/out.mp4"))
    assert opts.output == Path.home() / "out.mp4"


def test_extra_fields_forbidden() -> None:
    """Unknown options are rejected."""
    with pytest.raises(ValidationError):
        Options.model_validate({"source": "a.mp4", "bogus": 1})
