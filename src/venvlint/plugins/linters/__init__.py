"""Linter adapters for venvlint.

Built-in adapters cover ruff, flake8, pylint and mypy. Additional
adapters are discovered via the venvlint.linters entry point group.
"""

from venvlint.plugins.linters.base import BaseLinter, LinterInfo
from venvlint.plugins.linters.flake8 import Flake8
from venvlint.plugins.linters.mypy import Mypy
from venvlint.plugins.linters.pylint import Pylint
from venvlint.plugins.linters.ruff import Ruff
from venvlint.plugins.linters.manager import LinterManager, available_linters

__all__ = [
    "BaseLinter",
    "Flake8",
    "LinterInfo",
    "LinterManager",
    "Mypy",
    "Pylint",
    "Ruff",
    "available_linters",
]
