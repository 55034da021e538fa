"""Console entrypoint for the crustier application.

This module delegates to :mod:`crustier.cli` so that running
``python -m crustier`` or the installed ``crustier`` console script
executes the same code.
"""

from __future__ import annotations

import sys

from crustier.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`crustier.cli.main`)."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
