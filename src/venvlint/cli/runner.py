"""CLI runner orchestration.

This module handles command dispatch and execution for the venvlint CLI.
"""

from __future__ import annotations

from argparse import Namespace
from importlib.metadata import PackageNotFoundError, version
from typing import Iterable, Optional

from venvlint.cli.arguments import build_parser
from venvlint.cli.commands import Command, InterpreterCommand, LintCommand, ValidateCommand
from venvlint.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from venvlint.config.loader import ConfigError, find_project_config
from venvlint.config.store import ConfigurationStore, YamlConfigurationStore
from venvlint.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Get venvlint version.

    Returns:
        Version string from package metadata or fallback.
    """
    try:
        return version("venvlint")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from venvlint import __version__
        return __version__


def load_store(args: Namespace) -> ConfigurationStore:
    """Build the configuration store for the selected workspace.

    Raises:
        ConfigError: If an explicit config file is missing or invalid.
    """
    config_path = args.config
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
    else:
        config_path = find_project_config(args.root.resolve())

    if config_path is None:
        LOGGER.debug("No config file found, using defaults")
        return ConfigurationStore()
    LOGGER.debug(f"Loading config from {config_path}")
    return YamlConfigurationStore(config_path)


class CLIRunner:
    """Orchestrates CLI execution with subcommand dispatch."""

    def __init__(self) -> None:
        """Initialize CLIRunner with parser and commands."""
        self.parser = build_parser()
        self._version = get_version()
        self.commands = {
            command.name: command
            for command in (InterpreterCommand(), LintCommand(), ValidateCommand())
        }

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        args = self.parser.parse_args(list(argv) if argv is not None else None)

        # Configure logging as early as possible
        configure_logging(
            debug=args.debug,
            verbose=args.verbose,
            quiet=args.quiet,
        )

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command: Optional[Command] = self.commands.get(getattr(args, "command", None) or "")
        if command is None:
            self.parser.print_help()
            return EXIT_SUCCESS

        # validate re-reads the file itself so it can report YAML errors
        if command.name == "validate":
            return command.execute(args, ConfigurationStore())

        try:
            store = load_store(args)
        except ConfigError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        return command.execute(args, store)
