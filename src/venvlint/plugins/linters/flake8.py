"""flake8 linter adapter.

flake8 is a wrapper around pycodestyle, pyflakes and mccabe.
https://flake8.pycqa.org/
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Optional

from venvlint.core.models import LintMessage, TextDocument
from venvlint.core.subprocess_runner import CancellationToken
from venvlint.plugins.linters.base import BaseLinter

if TYPE_CHECKING:
    from venvlint.settings import PythonSettings

COLUMN_OFFSET = 1

OUTPUT_FORMAT = "%(row)d,%(col)d,%(code).1s,%(code)s:%(text)s"


class Flake8(BaseLinter):
    """flake8 adapter reading the document from stdin."""

    # 12,5,E,E225:missing whitespace around operator
    REGEX = re.compile(r"(?P<line>\d+),(?P<column>-?\d+),(?P<type>\w+),(?P<code>\w+\d+):(?P<message>.*)$")

    def __init__(self, settings: "PythonSettings"):
        super().__init__(settings, COLUMN_OFFSET)

    @property
    def name(self) -> str:
        return "flake8"

    def build_args(self, document: TextDocument) -> List[str]:
        return [
            f"--format={OUTPUT_FORMAT}",
            *self.info.args,
            "--stdin-display-name", str(document.path),
            "-",
        ]

    async def run_linter(
        self,
        document: TextDocument,
        token: Optional[CancellationToken],
    ) -> List[LintMessage]:
        return await self.run(self.build_args(document), document, token)
