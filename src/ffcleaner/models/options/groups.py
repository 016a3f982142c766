"""Shared Cyclopts groups for option models."""

from __future__ import annotations

from cyclopts import Group

SOURCE_GROUP = Group.create_ordered("Source")
OUTPUT_GROUP = Group.create_ordered("Output")
TIME_GROUP = Group.create_ordered("Time")
MUTE_GROUP = Group.create_ordered("Mute")
VIDEO_GROUP = Group.create_ordered("Video")
AUDIO_GROUP = Group.create_ordered("Audio")
RUNTIME_GROUP = Group.create_ordered("Runtime")

__all__ = [
    "AUDIO_GROUP",
    "MUTE_GROUP",
    "OUTPUT_GROUP",
    "RUNTIME_GROUP",
    "SOURCE_GROUP",
    "TIME_GROUP",
    "VIDEO_GROUP",
]
