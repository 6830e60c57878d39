"""Lint command implementation."""

from __future__ import annotations

import asyncio
import json
from argparse import Namespace
from typing import TYPE_CHECKING, Any, Dict

from venvlint.cli.commands import Command
from venvlint.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_ISSUES_FOUND, EXIT_SUCCESS
from venvlint.core.logging import get_logger
from venvlint.core.models import TextDocument
from venvlint.diagnostics import collect_fixes, to_diagnostics
from venvlint.plugins.linters.manager import LinterManager
from venvlint.settings import PythonSettings

if TYPE_CHECKING:
    from venvlint.config.store import ConfigurationStore

LOGGER = get_logger(__name__)


class LintCommand(Command):
    """Lints one file and prints its diagnostics as JSON."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "lint"

    def execute(self, args: Namespace, store: "ConfigurationStore") -> int:
        """Execute the lint command.

        Args:
            args: Parsed command-line arguments.
            store: Configuration store for the workspace.

        Returns:
            0 when clean, 1 when diagnostics were reported, 2 when the file
            cannot be read.
        """
        try:
            document = TextDocument.from_file(args.file)
        except (OSError, UnicodeDecodeError) as e:
            LOGGER.error(f"Cannot read {args.file}: {e}")
            return EXIT_INVALID_USAGE

        settings = PythonSettings(args.root.resolve(), store)
        try:
            manager = LinterManager(settings)
            messages = asyncio.run(manager.lint(document))
        finally:
            settings.dispose()

        result: Dict[str, Any] = {"diagnostics": to_diagnostics(messages, document.uri)}
        if getattr(args, "fixes", False):
            result["fixes"] = [edit.to_dict() for edit in collect_fixes(messages)]
        print(json.dumps(result, indent=2))

        return EXIT_ISSUES_FOUND if messages else EXIT_SUCCESS
