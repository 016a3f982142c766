"""Helpers for executing FFmpeg and ffprobe commands."""

import logging
import os
import shlex
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from .helpers import emit_status

_AUDIO_FILTER = "-af"

logger = logging.getLogger(__name__)


def cache_key(cmd: Sequence[str | Path]) -> tuple[Any, ...]:
    """Return a cache key for ``cmd`` based on tokens and file metadata."""
    key_parts: list[Any] = []
    for token in cmd:
        s = str(token)
        key_parts.append(s)
        if s.startswith("-"):
            continue
        path = Path(s)
        if path.is_file():
            try:
                stat = path.stat()
            except OSError:
                continue
            key_parts.extend([int(stat.st_mtime_ns), stat.st_size])
    return tuple(key_parts)


def _run_streaming(
    cmd: list[str],
    *,
    verbose: bool,
    creationflags: int,
    log: Callable[[str], None],
) -> str:
    """Run a command, mirroring one stream line by line and returning it.

    Verbose runs merge stdout into stderr and mirror both; otherwise stdout is
    discarded and only the error stream is mirrored.
    """
    with subprocess.Popen(  # noqa: S603
        cmd,
        stdout=subprocess.PIPE if verbose else subprocess.DEVNULL,
        stderr=subprocess.STDOUT if verbose else subprocess.PIPE,
        text=True,
        bufsize=1,
        creationflags=creationflags,
    ) as p:
        stream = p.stdout if verbose else p.stderr
        if stream is None:  # pragma: no cover - defensive
            raise RuntimeError("Failed to capture subprocess output")
        output_chunks: list[str] = []
        buf = ""
        for line in iter(stream.readline, ""):
            output_chunks.append(line)
            parts = line.split("\r")
            buf += parts[0]
            for part in parts[1:]:
                log(buf + "\r")
                buf = part
            if buf.endswith("\n"):
                log(buf[:-1])
                buf = ""
        if buf:
            log(buf)
        p.wait()
        output = "".join(output_chunks)
        if p.returncode:
            raise subprocess.CalledProcessError(p.returncode, cmd, output)
        return output


def run(
    exe: str | Path,
    args: Sequence[str | Path],
    *,
    verbose: bool = False,
    status_callback: Callable[[str], None] | None = None,
    list_cmd: bool = False,
) -> str:
    """Run an executable, mirroring its output, and return what was mirrored.

    Raises:
        subprocess.CalledProcessError: If the process exits with a non-zero code.
        OSError: If the executable cannot be started.

    """
    cmd = [str(exe), *[str(a) for a in args]]

    def log(message: str) -> None:
        emit_status(message, status_callback=status_callback)

    if list_cmd:
        log(f"Running: {join_command(exe, args)}")

    creationflags = getattr(subprocess, "CREATE_NO_WINDOW", 0)
    return _run_streaming(cmd, verbose=verbose, creationflags=creationflags, log=log)


def capture(exe: str | Path, args: Sequence[str | Path]) -> str:
    """Run an executable quietly and return its stdout.

    Raises:
        subprocess.CalledProcessError: If the process exits with a non-zero code.

    """
    proc = subprocess.run(  # noqa: S603
        [str(exe), *[str(a) for a in args]],
        capture_output=True,
        text=True,
        creationflags=getattr(subprocess, "CREATE_NO_WINDOW", 0),
        check=True,
    )
    return proc.stdout


def quote_arg(arg: str, *, force: bool = False) -> str:
    """Quote argument if needed."""
    if os.name == "nt":
        quoted = subprocess.list2cmdline([arg])
        if force and quoted == arg:
            return f'"{arg}"'
        return quoted
    quoted = shlex.quote(arg)
    if force and quoted == arg:
        return f"'{arg}'"
    return quoted


def join_command(exe: str | Path, args: Sequence[str | Path]) -> str:
    """Format a command for display."""
    parts = [str(exe), *[str(a) for a in args]]
    return " ".join(quote_arg(part, force=i > 0 and parts[i - 1] == _AUDIO_FILTER) for i, part in enumerate(parts))


__all__ = [
    "cache_key",
    "capture",
    "join_command",
    "quote_arg",
    "run",
]
