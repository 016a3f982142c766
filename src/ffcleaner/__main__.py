"""Allow ``python -m ffcleaner``."""

from .cli import main

raise SystemExit(main())
