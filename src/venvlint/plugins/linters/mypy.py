"""mypy adapter.

mypy is a static type checker for Python.
https://mypy-lang.org/

mypy cannot read the buffer from stdin, so it checks the saved file.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from venvlint.core.models import LintMessage, TextDocument
from venvlint.core.subprocess_runner import CancellationToken
from venvlint.plugins.linters.base import BaseLinter

if TYPE_CHECKING:
    from venvlint.settings import PythonSettings

COLUMN_OFFSET = 1


class Mypy(BaseLinter):
    """mypy adapter reporting messages for the linted file only."""

    # src/app.py:10:5: error: Incompatible return value type  [return-value]
    # C:\src\app.py:10:5: error: ...
    REGEX = re.compile(
        r"(?P<file>(?:[A-Za-z]:)?[^:]+):(?P<line>\d+)(?::(?P<column>\d+))?: (?P<type>\w+): "
        r"(?P<message>.*?)(?:  \[(?P<code>[\w-]+)\])?$"
    )

    def __init__(self, settings: "PythonSettings"):
        super().__init__(settings, COLUMN_OFFSET)

    @property
    def name(self) -> str:
        return "mypy"

    def build_args(self, document: TextDocument) -> List[str]:
        return [
            "--follow-imports=silent",
            "--show-column-numbers",
            "--no-pretty",
            *self.info.args,
            str(document.path),
        ]

    async def run_linter(
        self,
        document: TextDocument,
        token: Optional[CancellationToken],
    ) -> List[LintMessage]:
        messages = await self.run(self.build_args(document), document, token)
        return [msg for msg in messages if self._is_same_file(msg.file, document.path)]

    def _is_same_file(self, reported: Optional[str], path: Path) -> bool:
        if not reported:
            return True
        reported_path = Path(reported)
        if not reported_path.is_absolute():
            reported_path = self.settings.workspace_root / reported_path
        return reported_path.resolve() == path.resolve()
