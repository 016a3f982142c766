"""Interactive prompts used when no input is given on the command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ffcleaner.models import Options

if TYPE_CHECKING:
    from collections.abc import Callable

MODES = {
    "1": "Cut (Trim video)",
    "2": "Mute (Mute a section)",
    "3": "Extract MP3",
}

# Fields the prompts fill in; everything else keeps its command-line value.
PROMPTED_FIELDS = {"source", "url", "output", "time", "mute"}


def _ask(prompt: str, reader: Callable[[str], str]) -> str:
    try:
        return reader(prompt).strip()
    except EOFError:
        return ""


def prompt_options(
    opts: Options,
    *,
    reader: Callable[[str], str] = input,
    writer: Callable[[str], None] = print,
) -> Options:
    """Ask for the input and operation, returning updated options.

    Preset, CRF and runtime settings from ``opts`` are kept. The output path
    is always derived from the input.

    Raises:
        ValueError: If no input is entered, the mode is invalid, or an entered
            time cannot be parsed.

    """
    source = _ask("Enter input video file path or YouTube URL: ", reader)
    if not source:
        raise ValueError("Input file or URL required.")

    writer("Select Mode:")
    for key, label in MODES.items():
        writer(f"{key}. {label}")
    mode = _ask(f"Enter choice ({', '.join(MODES)}): ", reader)

    data = opts.model_dump(exclude=PROMPTED_FIELDS)
    data["source"] = source
    data["audio"]["extract"] = False
    if mode == "1":
        writer("--- Cut Mode ---")
        data["time"] = {
            "start": _ask("Enter Start Time (e.g., 00:05 or 5): ", reader),
            "end": _ask("Enter End Time (e.g., 00:10 or 10): ", reader),
        }
    elif mode == "2":
        writer("--- Mute Mode ---")
        data["mute"] = {
            "start": _ask("Enter Start Time to Mute (e.g., 00:05 or 5): ", reader),
            "end": _ask("Enter End Time to Mute (e.g., 00:10 or 10): ", reader),
        }
    elif mode == "3":
        writer("--- MP3 Extraction Mode ---")
        data["audio"]["extract"] = True
    else:
        raise ValueError(f"Invalid mode selected: {mode!r}")
    return Options.model_validate(data)


__all__ = ["MODES", "prompt_options"]
