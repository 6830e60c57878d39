"""Validate command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

from venvlint.cli.commands import Command
from venvlint.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_ISSUES_FOUND, EXIT_SUCCESS
from venvlint.config.loader import find_project_config
from venvlint.config.validation import validate_config_file

if TYPE_CHECKING:
    from venvlint.config.store import ConfigurationStore


class ValidateCommand(Command):
    """Validates the workspace configuration file."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "validate"

    def execute(self, args: Namespace, store: "ConfigurationStore") -> int:
        """Execute the validate command.

        Args:
            args: Parsed command-line arguments.
            store: Configuration store (unused; the file is re-read).

        Returns:
            0 if valid, 1 if there are warnings, 2 if no file was found.
        """
        config_path = args.config or find_project_config(args.root.resolve())
        if config_path is None or not config_path.exists():
            print("No configuration file found.")
            return EXIT_INVALID_USAGE

        warnings = validate_config_file(config_path)
        if not warnings:
            print(f"{config_path}: OK")
            return EXIT_SUCCESS

        for warning in warnings:
            print(f"{warning.source}: {warning.message}")
        return EXIT_ISSUES_FOUND
