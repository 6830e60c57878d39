"""pylint linter adapter.

https://pylint.readthedocs.io/
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Optional

from venvlint.core.models import LintMessage, TextDocument
from venvlint.core.subprocess_runner import CancellationToken
from venvlint.plugins.linters.base import BaseLinter

if TYPE_CHECKING:
    from venvlint.settings import PythonSettings

# pylint columns are already 0-based
COLUMN_OFFSET = 0

MSG_TEMPLATE = "{line},{column},{category},{symbol}:{msg}"


class Pylint(BaseLinter):
    """pylint adapter reading the document from stdin."""

    # 3,0,warning,unused-import:Unused import os
    REGEX = re.compile(r"(?P<line>\d+),(?P<column>-?\d+),(?P<type>\w+),(?P<code>[\w-]+):(?P<message>.*)$")

    def __init__(self, settings: "PythonSettings"):
        super().__init__(settings, COLUMN_OFFSET)

    @property
    def name(self) -> str:
        return "pylint"

    def build_args(self, document: TextDocument) -> List[str]:
        return [
            f"--msg-template={MSG_TEMPLATE}",
            "--reports=n",
            "--output-format=text",
            *self.info.args,
            "--from-stdin", str(document.path),
        ]

    async def run_linter(
        self,
        document: TextDocument,
        token: Optional[CancellationToken],
    ) -> List[LintMessage]:
        return await self.run(self.build_args(document), document, token)
