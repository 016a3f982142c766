"""Runtime context shared across ffcleaner components."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Self

from diskcache import Cache

from ffcleaner.models.verbosity import Verbosity

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType


def cache_dir() -> Path:
    """Return the probe cache directory, honoring ``FFCLEANER_CACHE``."""
    return Path(os.getenv("FFCLEANER_CACHE", tempfile.gettempdir())) / "ffcleaner-cache"


def _default_cache() -> Cache:
    """Return the on-disk cache for ffprobe results."""
    return Cache(str(cache_dir()))


@dataclass(slots=True)
class RuntimeContext:
    """Runtime flags and probe cache for a single invocation."""

    verbosity: Verbosity = Verbosity.QUIET
    dry_run: bool = False
    status_callback: Callable[[str], None] | None = None
    cache: Cache = field(default_factory=_default_cache)

    def close(self) -> None:
        """Close any open resources."""
        self.cache.close()

    def __enter__(self) -> Self:
        """Return ``self`` when entering a context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close resources when exiting a context."""
        self.close()

    def __del__(self) -> None:  # pragma: no cover - cleanup
        with suppress(Exception):
            self.cache.close()


__all__ = ["RuntimeContext", "cache_dir"]
