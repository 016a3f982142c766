"""Expose models and type definitions."""

from .context import RuntimeContext
from .ffprobe import MediaInfo
from .options import Options
from .plan import JobPlan
from .types import Operation, Preset
from .verbosity import Verbosity

__all__ = [
    "JobPlan",
    "MediaInfo",
    "Operation",
    "Options",
    "Preset",
    "RuntimeContext",
    "Verbosity",
]
