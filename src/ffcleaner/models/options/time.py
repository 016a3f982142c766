"""Time selection option models."""

from __future__ import annotations

from typing import ClassVar

from cyclopts import Parameter
from pydantic import BaseModel, Field, field_validator, model_validator

from ffcleaner.tools import parse_timestamp

from .groups import MUTE_GROUP, TIME_GROUP

TIME_EXAMPLES = "Examples: '90', '01:30', '00:01:30', '1m30s'."


def _validate_timestamp(v: str | None) -> str | None:
    """Ensure a time string is parseable, normalizing blanks to ``None``."""
    if v is None or not v.strip():
        return None
    try:
        parse_timestamp(v)
    except ValueError as exc:
        raise ValueError(f"Invalid time format: {v}") from exc
    return v.strip()


def _seconds(v: str | None) -> float | None:
    return None if v is None else parse_timestamp(v)


@Parameter(group=TIME_GROUP)
class TimeOptions(BaseModel):
    """Clip boundaries applied while reading the source."""

    TIME_DESC_TEMPLATE: ClassVar[str] = "{} for the clip. " + TIME_EXAMPLES

    start: str | None = Field(None, description=TIME_DESC_TEMPLATE.format("Start time"))
    end: str | None = Field(None, description=TIME_DESC_TEMPLATE.format("End time"))

    @field_validator("start", "end")
    @classmethod
    def validate_time_format(cls, v: str | None) -> str | None:
        """Ensure time strings are parseable."""
        return _validate_timestamp(v)

    @model_validator(mode="after")
    def validate_order(self) -> TimeOptions:
        """Reject an end time at or before the start time."""
        if self.start_sec is not None and self.end_sec is not None and self.end_sec <= self.start_sec:
            raise ValueError("'end' must be after 'start'")
        return self

    @property
    def start_sec(self) -> float | None:
        """Start time in seconds."""
        return _seconds(self.start)

    @property
    def end_sec(self) -> float | None:
        """End time in seconds."""
        return _seconds(self.end)

    @property
    def is_set(self) -> bool:
        """Whether any clip boundary was given."""
        return self.start is not None or self.end is not None


@Parameter(group=MUTE_GROUP)
class MuteOptions(BaseModel):
    """A window of source time during which audio is silenced."""

    start: str | None = Field(None, description="Start of the section to mute. " + TIME_EXAMPLES)
    end: str | None = Field(None, description="End of the section to mute. " + TIME_EXAMPLES)

    @field_validator("start", "end")
    @classmethod
    def validate_time_format(cls, v: str | None) -> str | None:
        """Ensure time strings are parseable."""
        return _validate_timestamp(v)

    @model_validator(mode="after")
    def validate_window(self) -> MuteOptions:
        """Require both ends of the window, in order."""
        if (self.start is None) != (self.end is None):
            raise ValueError("Muting requires both 'mute.start' and 'mute.end'")
        if self.start_sec is not None and self.end_sec is not None and self.end_sec <= self.start_sec:
            raise ValueError("'mute.end' must be after 'mute.start'")
        return self

    @property
    def start_sec(self) -> float | None:
        """Mute start in seconds."""
        return _seconds(self.start)

    @property
    def end_sec(self) -> float | None:
        """Mute end in seconds."""
        return _seconds(self.end)

    @property
    def is_set(self) -> bool:
        """Whether a mute window was given."""
        return self.start is not None and self.end is not None


__all__ = ["MuteOptions", "TimeOptions"]
