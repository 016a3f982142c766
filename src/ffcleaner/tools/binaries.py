"""Locate the ``ffmpeg`` and ``ffprobe`` executables."""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path

FFMPEG = "ffmpeg"
FFPROBE = "ffprobe"
BIN_DIR = "bin"
EXE_SUFFIX = ".exe"

logger = logging.getLogger(__name__)


def app_dir() -> Path:
    """Return the directory of the running application.

    For frozen builds this is the directory of the executable itself,
    otherwise the directory of the entry script.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(sys.argv[0]).resolve().parent


def candidate_dirs() -> list[Path]:
    """Return the local ``bin`` directories searched before ``PATH``."""
    return [app_dir() / BIN_DIR, Path.cwd() / BIN_DIR]


def _find_in(directory: Path, name: str) -> Path | None:
    """Return ``name`` or ``name.exe`` inside ``directory`` if it exists."""
    for candidate in (directory / name, directory / f"{name}{EXE_SUFFIX}"):
        if candidate.is_file():
            return candidate
    return None


def resolve_binary(name: str) -> str:
    """Return the path to executable ``name`` or an empty string.

    Search order:
        1. ``bin/`` next to the running application.
        2. ``bin/`` under the current working directory.
        3. The system ``PATH``.
    """
    for directory in candidate_dirs():
        found = _find_in(directory, name)
        if found is not None:
            logger.debug("Resolved %s to %s", name, found)
            return str(found)
    found_on_path = shutil.which(name)
    if found_on_path:
        logger.debug("Resolved %s from PATH: %s", name, found_on_path)
        return found_on_path
    logger.debug("Could not resolve %s", name)
    return ""


__all__ = ["FFMPEG", "FFPROBE", "app_dir", "candidate_dirs", "resolve_binary"]
