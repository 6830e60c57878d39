"""Argument parser construction for venvlint CLI.

This module builds the argument parser with subcommands:
- venvlint interpreter - Show the resolved Python interpreter
- venvlint lint        - Lint a file with the enabled linters
- venvlint validate    - Validate the configuration file
"""

from __future__ import annotations

import argparse
from pathlib import Path


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    """Add global options available to all commands."""
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show venvlint version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Reduce logging output to errors only.",
    )
    parser.add_argument(
        "--root",
        metavar="PATH",
        type=Path,
        default=Path("."),
        help="Workspace root (default: current directory).",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: .venvlint.yml in the workspace root).",
    )


def _build_interpreter_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'interpreter' subcommand parser."""
    interpreter_parser = subparsers.add_parser(
        "interpreter",
        help="Show the Python interpreter resolved for the workspace.",
        description=(
            "Probe the workspace for virtualenv, conda, pyenv, pipenv and "
            "poetry environments and print the interpreter that would be used."
        ),
    )
    interpreter_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON.",
    )


def _build_lint_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'lint' subcommand parser."""
    lint_parser = subparsers.add_parser(
        "lint",
        help="Lint a Python file with the enabled linters.",
        description=(
            "Run every linter enabled under python.linting on FILE and print "
            "the diagnostics as JSON, grouped by document URI."
        ),
    )
    lint_parser.add_argument(
        "file",
        type=Path,
        help="File to lint.",
    )
    lint_parser.add_argument(
        "--fixes",
        action="store_true",
        help="Include the suggested fix edits in the output.",
    )


def _build_validate_parser(subparsers: argparse._SubParsersAction) -> None:
    """Build the 'validate' subcommand parser."""
    subparsers.add_parser(
        "validate",
        help="Validate the configuration file.",
        description="Check the python settings for unknown keys and wrong types.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for venvlint CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="venvlint",
        description="Python linter adapters and interpreter resolution.",
    )
    _add_global_options(parser)

    subparsers = parser.add_subparsers(dest="command", title="commands")
    _build_interpreter_parser(subparsers)
    _build_lint_parser(subparsers)
    _build_validate_parser(subparsers)

    return parser
