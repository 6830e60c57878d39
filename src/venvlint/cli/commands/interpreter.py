"""Interpreter command implementation."""

from __future__ import annotations

import json
from argparse import Namespace
from typing import TYPE_CHECKING

from venvlint.cli.commands import Command
from venvlint.cli.exit_codes import EXIT_SUCCESS
from venvlint.settings import PythonSettings

if TYPE_CHECKING:
    from venvlint.config.store import ConfigurationStore


class InterpreterCommand(Command):
    """Shows the interpreter and site packages resolved for a workspace."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "interpreter"

    def execute(self, args: Namespace, store: "ConfigurationStore") -> int:
        """Execute the interpreter command.

        Args:
            args: Parsed command-line arguments.
            store: Configuration store for the workspace.

        Returns:
            Exit code (always 0; resolution never fails).
        """
        settings = PythonSettings(args.root.resolve(), store)
        try:
            if getattr(args, "json", False):
                print(json.dumps({
                    "pythonPath": settings.python_path,
                    "configPythonPath": settings.config_python_path,
                    "sitePackages": settings.std_libs,
                }, indent=2))
            else:
                print(f"Python interpreter: {settings.python_path}")
                print(f"Configured interpreter: {settings.config_python_path}")
                for path in settings.std_libs:
                    print(f"Site packages: {path}")
        finally:
            settings.dispose()
        return EXIT_SUCCESS
