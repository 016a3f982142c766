"""Tests for remote video download."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from yt_dlp.utils import DownloadError

from ffcleaner.tools import fetch

if TYPE_CHECKING:
    from pathlib import Path


class FakeYoutubeDL:
    """Stand-in for ``yt_dlp.YoutubeDL`` that writes a small file."""

    instances: list[FakeYoutubeDL] = []
    info: dict[str, Any] | None = {"title": 'My: "Great" Talk?'}
    fail_on: str | None = None

    def __init__(self, params: dict[str, Any]) -> None:
        self.params = params
        self.downloaded: list[str] = []
        type(self).instances.append(self)

    def __enter__(self) -> FakeYoutubeDL:
        return self

    def __exit__(self, *_exc: object) -> None:
        return None

    def extract_info(self, url: str, *, download: bool) -> dict[str, Any] | None:
        assert not download
        if self.fail_on == "info":
            raise DownloadError("unavailable")
        return self.info

    def download(self, urls: list[str]) -> int:
        if self.fail_on == "download":
            raise DownloadError("403")
        self.downloaded.extend(urls)
        with open(self.params["outtmpl"].replace("%%", "%"), "wb") as fh:
            fh.write(b"video")
        return 0


@pytest.fixture
def fake_ydl(monkeypatch: pytest.MonkeyPatch) -> type[FakeYoutubeDL]:
    """Install a fresh fake downloader class."""

    class Fake(FakeYoutubeDL):
        instances: list[FakeYoutubeDL] = []

    monkeypatch.setattr(fetch, "YoutubeDL", Fake)
    return Fake


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("https://youtu.be/x", True),
        ("http://example.com/v.mp4", True),
        ("www.youtube.com/watch?v=x", True),
        ("HTTPS://EXAMPLE.COM", True),
        ("clip.mp4", False),
        ("/home/me/https.mp4", False),
    ],
)
def test_is_remote(source: str, expected: bool) -> None:
    """Recognise URL prefixes."""
    assert fetch.is_remote(source) is expected


def test_sanitize_filename() -> None:
    """Replace characters that are invalid on common filesystems."""
    assert fetch.sanitize_filename('a<b>c:d"e/f\\g|h?i*j') == "a_b_c_d_e_f_g_h_i_j"
    assert fetch.sanitize_filename("   ") == fetch.DEFAULT_TITLE


def test_ensure_unique_filename(tmp_path: Path) -> None:
    """Existing files get numbered siblings."""
    target = tmp_path / "clip.mp4"
    assert fetch.ensure_unique_filename(target) == target
    target.write_text("")
    (tmp_path / "clip_1.mp4").write_text("")
    assert fetch.ensure_unique_filename(target) == tmp_path / "clip_2.mp4"


def test_download_video(tmp_path: Path, fake_ydl: type[FakeYoutubeDL]) -> None:
    """Download to a sanitized, title-based MP4 path."""
    messages: list[str] = []
    path = fetch.download_video("https://youtu.be/x", dest_dir=tmp_path, status_callback=messages.append)
    assert path == tmp_path / "My_ _Great_ Talk_.mp4"
    assert path.read_bytes() == b"video"
    info_ydl, download_ydl = fake_ydl.instances
    assert info_ydl.params["format"] == fetch.MUXED_FORMAT
    assert download_ydl.params["outtmpl"] == str(path)
    assert download_ydl.downloaded == ["https://youtu.be/x"]
    assert "Found video: My: \"Great\" Talk?" in messages


def test_download_video_www_prefix(tmp_path: Path, fake_ydl: type[FakeYoutubeDL]) -> None:
    """Bare ``www.`` URLs get an https scheme."""
    fetch.download_video("www.youtube.com/watch?v=x", dest_dir=tmp_path)
    assert fake_ydl.instances[-1].downloaded == ["https://www.youtube.com/watch?v=x"]


def test_download_video_does_not_overwrite(tmp_path: Path, fake_ydl: type[FakeYoutubeDL]) -> None:
    """An existing file with the same title is kept."""
    fake_ydl.info = {"title": "clip"}
    (tmp_path / "clip.mp4").write_text("old")
    path = fetch.download_video("https://youtu.be/x", dest_dir=tmp_path)
    assert path == tmp_path / "clip_1.mp4"
    assert (tmp_path / "clip.mp4").read_text() == "old"


def test_percent_in_title_is_escaped(tmp_path: Path, fake_ydl: type[FakeYoutubeDL]) -> None:
    """Titles with ``%`` are not treated as output templates."""
    fake_ydl.info = {"title": "100% real"}
    path = fetch.download_video("https://youtu.be/x", dest_dir=tmp_path)
    assert fake_ydl.instances[-1].params["outtmpl"] == str(tmp_path / "100%% real.mp4")
    assert path == tmp_path / "100% real.mp4"


@pytest.mark.parametrize(("stage", "message"), [("info", "Failed to get video info"), ("download", "Failed to download")])
def test_download_errors(tmp_path: Path, fake_ydl: type[FakeYoutubeDL], stage: str, message: str) -> None:
    """yt-dlp errors become ``FetchError``."""
    fake_ydl.fail_on = stage
    with pytest.raises(fetch.FetchError, match=message):
        fetch.download_video("https://youtu.be/x", dest_dir=tmp_path)


def test_download_no_info(tmp_path: Path, fake_ydl: type[FakeYoutubeDL]) -> None:
    """A missing info dict is an error."""
    fake_ydl.info = None
    with pytest.raises(fetch.FetchError, match="No video information"):
        fetch.download_video("https://youtu.be/x", dest_dir=tmp_path)
