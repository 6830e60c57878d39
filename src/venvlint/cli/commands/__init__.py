"""CLI commands package.

This module provides the base Command class and exports all command implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from venvlint.config.store import ConfigurationStore


class Command(ABC):
    """Base class for CLI commands.

    All CLI commands should inherit from this class and implement
    the execute method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier.

        Returns:
            String name of the command.
        """

    @abstractmethod
    def execute(self, args: Namespace, store: "ConfigurationStore") -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.
            store: Configuration store for the workspace.

        Returns:
            Exit code (0 for success, non-zero for error).
        """


# ruff: noqa: E402
from venvlint.cli.commands.interpreter import InterpreterCommand
from venvlint.cli.commands.lint import LintCommand
from venvlint.cli.commands.validate import ValidateCommand

__all__ = [
    "Command",
    "InterpreterCommand",
    "LintCommand",
    "ValidateCommand",
]
