"""Download remote videos with yt-dlp."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

from yt_dlp import YoutubeDL
from yt_dlp.utils import DownloadError

from .helpers import emit_status

if TYPE_CHECKING:
    from collections.abc import Callable

REMOTE_PREFIXES = ("http://", "https://", "www.")
VIDEO_EXTENSION = ".mp4"
DEFAULT_TITLE = "video"

# Single-file formats that carry both audio and video, MP4 first.
MUXED_FORMAT = "best[ext=mp4][acodec!=none][vcodec!=none]/best[acodec!=none][vcodec!=none]"

_INVALID_CHARS = re.compile(r'[<>:"/\\|?*]')

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """Raised when a remote video cannot be downloaded."""


def is_remote(source: str) -> bool:
    """Return ``True`` if ``source`` looks like a URL rather than a path."""
    return source.strip().lower().startswith(REMOTE_PREFIXES)


def sanitize_filename(name: str) -> str:
    """Replace characters that are invalid in filenames with ``_``."""
    cleaned = _INVALID_CHARS.sub("_", name).strip()
    return cleaned or DEFAULT_TITLE


def ensure_unique_filename(path: Path) -> Path:
    """Return ``path`` or the first ``<stem>_<n><suffix>`` that does not exist."""
    if not path.exists():
        return path
    i = 1
    while True:
        candidate = path.with_name(f"{path.stem}_{i}{path.suffix}")
        if not candidate.exists():
            return candidate
        i += 1


def _base_options(*, verbose: bool) -> dict[str, Any]:
    return {
        "format": MUXED_FORMAT,
        "noplaylist": True,
        "quiet": not verbose,
        "noprogress": not verbose,
        "no_warnings": not verbose,
    }


def download_video(
    url: str,
    *,
    dest_dir: Path | None = None,
    status_callback: Callable[[str], None] | None = None,
    verbose: bool = False,
) -> Path:
    """Download ``url`` and return the local file path.

    The file is named after the sanitized video title with an ``.mp4``
    extension and never overwrites an existing file.

    Raises:
        FetchError: If metadata lookup or the download fails.

    """
    directory = dest_dir or Path.cwd()
    if url.lower().startswith("www."):
        url = f"https://{url}"

    emit_status(f"Fetching video info for: {url}", status_callback=status_callback)
    try:
        with YoutubeDL(_base_options(verbose=verbose)) as ydl:
            info = ydl.extract_info(url, download=False)
    except DownloadError as e:
        raise FetchError(f"Failed to get video info: {e}") from e
    if not info:
        raise FetchError(f"No video information returned for: {url}")

    title = str(info.get("title") or DEFAULT_TITLE)
    emit_status(f"Found video: {title}", status_callback=status_callback)

    target = ensure_unique_filename(directory / f"{sanitize_filename(title)}{VIDEO_EXTENSION}")
    opts = _base_options(verbose=verbose)
    # yt-dlp treats ``%`` as a template marker.
    opts["outtmpl"] = str(target).replace("%", "%%")
    emit_status(f"Downloading to: {target}", status_callback=status_callback)
    try:
        with YoutubeDL(opts) as ydl:
            ydl.download([url])
    except DownloadError as e:
        raise FetchError(f"Failed to download video: {e}") from e

    if not target.is_file() or target.stat().st_size == 0:
        raise FetchError(f"Downloaded file is missing or empty: {target}")
    logger.debug("Downloaded %s to %s", url, target)
    return target


__all__ = [
    "FetchError",
    "download_video",
    "ensure_unique_filename",
    "is_remote",
    "sanitize_filename",
]
