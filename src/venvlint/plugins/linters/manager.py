"""Selection and execution of the enabled linters for a workspace."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Type

from venvlint.config.ignore import IgnorePatterns
from venvlint.core.logging import get_logger
from venvlint.core.models import LintMessage, TextDocument
from venvlint.core.subprocess_runner import CancellationToken
from venvlint.plugins.discovery import LINTER_ENTRY_POINT_GROUP, discover_plugins
from venvlint.plugins.linters.base import BaseLinter
from venvlint.plugins.linters.flake8 import Flake8
from venvlint.plugins.linters.mypy import Mypy
from venvlint.plugins.linters.pylint import Pylint
from venvlint.plugins.linters.ruff import Ruff

if TYPE_CHECKING:
    from venvlint.settings import PythonSettings

LOGGER = get_logger(__name__)

BUILTIN_LINTERS: Dict[str, Type[BaseLinter]] = {
    "ruff": Ruff,
    "flake8": Flake8,
    "pylint": Pylint,
    "mypy": Mypy,
}

# Linters with settings keys but no adapter
UNSUPPORTED_LINTERS = ("pycodestyle", "pyflakes", "pylama", "prospector", "pydocstyle", "bandit")


def available_linters() -> Dict[str, Type[BaseLinter]]:
    """Built-in adapters plus any registered through entry points.

    Built-ins win on name clashes.
    """
    linters = discover_plugins(LINTER_ENTRY_POINT_GROUP, BaseLinter)
    linters.update(BUILTIN_LINTERS)
    return linters


class LinterManager:
    """Runs the enabled linters of a workspace over a document."""

    def __init__(
        self,
        settings: "PythonSettings",
        linters: Optional[Dict[str, Type[BaseLinter]]] = None,
    ):
        """Initialize LinterManager.

        Args:
            settings: Workspace settings.
            linters: Linter classes by id; defaults to ``available_linters()``.
        """
        self.settings = settings
        self.linters = linters if linters is not None else available_linters()

    def get_active_linters(self) -> List[BaseLinter]:
        """Instantiate every linter whose ``<id>Enabled`` setting is on."""
        linting = self.settings.linting
        active = []
        for linter_id, linter_class in self.linters.items():
            if linting.is_enabled(linter_id):
                active.append(linter_class(self.settings))
        for linter_id in UNSUPPORTED_LINTERS:
            if linting.is_enabled(linter_id):
                LOGGER.warning(f"Linter '{linter_id}' is enabled but not supported")
        return active

    def is_ignored(self, document: TextDocument) -> bool:
        patterns = IgnorePatterns(self.settings.linting.ignore_patterns, source="python.linting.ignorePatterns")
        return patterns.matches(document.path, self.settings.workspace_root)

    async def lint(
        self,
        document: TextDocument,
        token: Optional[CancellationToken] = None,
    ) -> List[LintMessage]:
        """Lint a document with every active linter, one at a time.

        Args:
            document: Document to lint.
            token: Optional cancellation token shared by all linters.

        Returns:
            Messages from all linters, truncated to ``maxNumberOfProblems``.
        """
        linting = self.settings.linting
        if not linting.enabled:
            LOGGER.debug("Linting disabled")
            return []
        if self.is_ignored(document):
            LOGGER.debug(f"Skipping ignored document: {document.path}")
            return []

        messages: List[LintMessage] = []
        for linter in self.get_active_linters():
            if token is not None and token.is_cancellation_requested:
                return []
            found = await linter.lint(document, token)
            LOGGER.info(f"{linter.name} found {len(found)} issues")
            messages.extend(found)

        if token is not None and token.is_cancellation_requested:
            return []
        return messages[: linting.max_number_of_problems]
