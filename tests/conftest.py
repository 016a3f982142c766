"""Shared pytest fixtures.

Binary resolution and ffprobe are stubbed so tests never depend on a local
FFmpeg install, and the probe cache lives in a per-test directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Never

import pytest

if TYPE_CHECKING:
    from pathlib import Path

FAKE_FFMPEG = "/opt/ffmpeg/bin/ffmpeg"
FAKE_FFPROBE = "/opt/ffmpeg/bin/ffprobe"


@pytest.fixture(autouse=True)
def _isolated_cache(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the probe cache at a temporary directory."""
    monkeypatch.setenv("FFCLEANER_CACHE", str(tmp_path_factory.mktemp("cache")))


@pytest.fixture(autouse=True)
def _fake_binaries(monkeypatch: pytest.MonkeyPatch) -> None:
    """Resolve ffmpeg/ffprobe to fixed fake paths during planning."""
    paths = {"ffmpeg": FAKE_FFMPEG, "ffprobe": FAKE_FFPROBE}
    monkeypatch.setattr("ffcleaner.models.plan.resolve_binary", lambda name: paths.get(name, ""))


@pytest.fixture(autouse=True)
def _no_ffprobe(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ffprobe call fail as if the binary were absent."""

    def _missing(exe: str, _args: object) -> Never:
        raise FileNotFoundError(exe)

    monkeypatch.setattr("ffcleaner.tools.probe.capture", _missing)


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Provide a placeholder input video; FFmpeg itself is never run on it."""
    data_dir = tmp_path / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    src = data_dir / "a.mp4"
    src.write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return src
