"""Command-line interface for venvlint."""

from __future__ import annotations

import sys
from typing import Iterable, Optional


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the ``venvlint`` console script."""
    from venvlint.cli.runner import CLIRunner

    return CLIRunner().run(argv)


if __name__ == "__main__":
    sys.exit(main())
