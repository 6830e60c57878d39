"""Gitignore-style matching for ``python.linting.ignorePatterns``.

Uses pathspec library for full gitignore compliance including:
- ** recursive globbing
- ! negation patterns
- # comments
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pathspec

from venvlint.core.logging import get_logger

LOGGER = get_logger(__name__)


class IgnorePatterns:
    """Compiled set of ignore patterns."""

    def __init__(
        self,
        patterns: List[str],
        source: str = "config",
    ) -> None:
        """Initialize with a list of gitignore-style patterns.

        Args:
            patterns: List of gitignore-style patterns.
            source: Source description for logging.
        """
        self._source = source

        clean_patterns = [
            p for p in patterns if p.strip() and not p.strip().startswith("#")
        ]

        self._spec = pathspec.PathSpec.from_lines(
            pathspec.patterns.GitWildMatchPattern,
            clean_patterns,
        )

        if clean_patterns:
            LOGGER.debug(f"Loaded {len(clean_patterns)} ignore patterns from {source}")

    def matches(self, path: Path, root: Path) -> bool:
        """Check if a path matches any ignore pattern.

        Args:
            path: Path to check (absolute or relative).
            root: Workspace root for relative path calculation.

        Returns:
            True if path should be ignored, False otherwise.
        """
        try:
            path_res = path.resolve() if path.is_absolute() else (root / path).resolve()
            rel_path = path_res.relative_to(root.resolve())
        except ValueError:
            rel_path = path

        # pathspec expects forward-slash paths
        rel_str = str(rel_path).replace("\\", "/")
        return self._spec.match_file(rel_str)
