"""Command-line interface entry point."""

import logging
import sys

from cyclopts import App

from .backend import ffcleaner

app = App(name="ffcleaner", result_action="return_value")
app.default(ffcleaner)


def main(argv: list[str] | None = None) -> int:
    """Run the ffcleaner CLI."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    argv = sys.argv[1:] if argv is None else argv
    return app(argv)


if __name__ == "__main__":
    raise SystemExit(main())
