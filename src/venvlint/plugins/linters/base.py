"""Base class for linter adapters.

A linter adapter knows how to invoke one external tool on a document and
how to turn the tool's output into ``LintMessage`` objects. Text-output
linters only need a command line and a line regex; JSON-output linters
override ``parse_messages``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Dict, List, Optional, Pattern

from venvlint.core.logging import get_logger
from venvlint.core.models import LintMessage, LintMessageSeverity, TextDocument
from venvlint.core.subprocess_runner import CancellationToken, run_with_input
from venvlint.environment.executable import find_sibling_executable

if TYPE_CHECKING:
    from venvlint.settings import PythonSettings

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class LinterInfo:
    """Per-linter settings resolved from ``python.linting``."""

    id: str
    enabled: bool
    path: str
    args: List[str] = field(default_factory=list)
    category_severity: Dict[str, str] = field(default_factory=dict)


class BaseLinter(ABC):
    """Abstract base class for linter adapters.

    Subclasses set ``name`` and implement ``run_linter``; text-output
    linters also set ``REGEX`` with named groups ``line``, ``column``,
    ``type``, ``code`` and ``message`` (optionally ``file``).
    """

    REGEX: Optional[Pattern[str]] = None

    def __init__(self, settings: "PythonSettings", column_offset: int = 0):
        """Initialize the adapter.

        Args:
            settings: Workspace settings providing tool paths and interpreter.
            column_offset: Amount subtracted from reported start columns.
        """
        self.settings = settings
        self.column_offset = column_offset

    @property
    @abstractmethod
    def name(self) -> str:
        """Linter identifier, matching the ``python.linting.<id>*`` keys."""

    @property
    def info(self) -> LinterInfo:
        linting = self.settings.linting
        return LinterInfo(
            id=self.name,
            enabled=linting.is_enabled(self.name),
            path=linting.tool_path(self.name),
            args=linting.tool_args(self.name),
            category_severity=linting.category_severity(self.name),
        )

    def executable(self) -> str:
        """Return the tool to spawn.

        A bare tool name is preferred from the interpreter's bin directory,
        so tools installed in the active virtualenv win over global ones.
        """
        path = self.info.path
        if "/" in path or "\\" in path:
            return path
        return find_sibling_executable(self.settings.python_path, path) or path

    async def lint(
        self,
        document: TextDocument,
        token: Optional[CancellationToken] = None,
    ) -> List[LintMessage]:
        """Lint a document.

        Args:
            document: Document to lint (its buffer text is sent on stdin).
            token: Optional cancellation token.

        Returns:
            Lint messages; empty when cancelled or when the tool fails.
        """
        if token is not None and token.is_cancellation_requested:
            return []
        return await self.run_linter(document, token)

    @abstractmethod
    async def run_linter(
        self,
        document: TextDocument,
        token: Optional[CancellationToken],
    ) -> List[LintMessage]:
        """Build the linter's arguments and call ``run``."""

    async def run(
        self,
        args: List[str],
        document: TextDocument,
        token: Optional[CancellationToken] = None,
    ) -> List[LintMessage]:
        """Spawn the linter with ``args`` and parse what it prints.

        Args:
            args: Arguments following the executable.
            document: Document whose text is streamed to stdin.
            token: Optional cancellation token.

        Returns:
            Parsed lint messages.
        """
        cmd = [self.executable(), *args]
        try:
            output = await run_with_input(
                cmd,
                document.text,
                cwd=self.settings.workspace_root,
                token=token,
            )
        except OSError as e:
            LOGGER.error(f"Linting with {self.name} failed: {e}")
            return []

        if output is None:
            return []
        return [
            msg if msg.file else replace(msg, file=str(document.path))
            for msg in self.parse_messages(output)
        ]

    def parse_messages(self, output: str) -> List[LintMessage]:
        """Parse line-oriented output with ``REGEX``.

        Lines that do not match are skipped.
        """
        messages: List[LintMessage] = []
        for line in output.splitlines():
            if not line.strip():
                continue
            message = self.parse_line(line)
            if message is None:
                LOGGER.debug(f"{self.name}: skipping unrecognised line: {line}")
                continue
            messages.append(message)
        return messages

    def parse_line(self, line: str) -> Optional[LintMessage]:
        """Convert one output line into a LintMessage, or None."""
        if self.REGEX is None:
            return None
        match = self.REGEX.match(line)
        if match is None:
            return None
        groups = match.groupdict()
        column = groups.get("column")
        category = groups.get("type") or ""
        return LintMessage(
            line=int(groups["line"]),
            column=int(column) - self.column_offset if column else 0,
            code=groups.get("code"),
            message=(groups.get("message") or "").strip(),
            severity=self.severity_for(category),
            provider=self.name,
            type=category,
            file=groups.get("file"),
        )

    def severity_for(self, category: str) -> LintMessageSeverity:
        """Map a tool category to a severity via ``<id>CategorySeverity``."""
        configured = self.info.category_severity.get(category)
        if configured:
            try:
                return LintMessageSeverity(configured)
            except ValueError:
                LOGGER.warning(f"{self.name}: unknown severity '{configured}' for '{category}'")
        return LintMessageSeverity.ERROR
