"""Time range argument helpers."""

from ffcleaner.models.plan import JobPlan
from ffcleaner.tools import format_time

START: tuple[str, ...] = ("-ss",)  #: Seek to this start timestamp before decoding.
END: tuple[str, ...] = ("-to",)  #: Stop reading the input at this timestamp.


def build(plan: JobPlan) -> tuple[str, ...]:
    """Return input-side trim args; placed before ``-i``."""
    args: tuple[str, ...] = ()
    if plan.start_sec is not None:
        args += (*START, format_time(plan.start_sec))
    if plan.end_sec is not None:
        args += (*END, format_time(plan.end_sec))
    return args
