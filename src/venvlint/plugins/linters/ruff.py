"""Ruff linter adapter.

Ruff is an extremely fast Python linter written in Rust.
https://github.com/astral-sh/ruff

Ruff reports JSON like::

    [
      {
        "code": "F401",
        "message": "`numpy` imported but unused",
        "fix": {
          "content": "",
          "location": {"row": 3, "column": 0},
          "end_location": {"row": 4, "column": 0}
        },
        "location": {"row": 3, "column": 8},
        "end_location": {"row": 3, "column": 19},
        "filename": "/path/to/bug.py"
      }
    ]
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from venvlint.core.logging import get_logger
from venvlint.core.models import (
    DiagnosticTag,
    LintMessage,
    LintMessageSeverity,
    Range,
    TextDocument,
    TextEdit,
    WorkspaceEdit,
    path_to_uri,
)
from venvlint.core.subprocess_runner import CancellationToken
from venvlint.plugins.linters.base import BaseLinter

if TYPE_CHECKING:
    from venvlint.settings import PythonSettings

LOGGER = get_logger(__name__)

COLUMN_OFFSET = 1

# Codes rendered faded out by the editor
UNUSED_CODES = frozenset({"F401", "F841"})


class Ruff(BaseLinter):
    """Ruff adapter using ruff's JSON output on stdin input."""

    def __init__(self, settings: "PythonSettings"):
        super().__init__(settings, COLUMN_OFFSET)

    @property
    def name(self) -> str:
        """Plugin identifier."""
        return "ruff"

    def build_args(self, document: TextDocument) -> List[str]:
        """Arguments for linting ``document`` read from stdin."""
        return [
            "--format", "json",
            "--exit-zero",
            *self.info.args,
            "--stdin-filename", str(document.path),
            "-",
        ]

    async def run_linter(
        self,
        document: TextDocument,
        token: Optional[CancellationToken],
    ) -> List[LintMessage]:
        return await self.run(self.build_args(document), document, token)

    def parse_messages(self, output: str) -> List[LintMessage]:
        """Parse Ruff JSON output.

        Args:
            output: JSON array printed by Ruff.

        Returns:
            One LintMessage per reported violation, in order. Malformed
            output yields an empty list.
        """
        try:
            return [self._violation_to_message(violation) for violation in json.loads(output)]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            LOGGER.error(f"Linting with {self.name} failed: {e}")
            return []

    def _violation_to_message(self, violation: Dict[str, Any]) -> LintMessage:
        code = violation.get("code")
        filename = violation.get("filename")
        location = violation["location"]
        end_location = violation.get("end_location") or {}
        return LintMessage(
            line=location["row"],
            column=location["column"] - COLUMN_OFFSET,
            end_line=end_location.get("row"),
            end_column=end_location.get("column"),
            code=code,
            message=violation.get("message", ""),
            # Ruff does not report a severity of its own
            severity=LintMessageSeverity.WARNING,
            provider=self.name,
            tags=(DiagnosticTag.UNNECESSARY,) if code in UNUSED_CODES else (),
            file=filename,
            fix=fix_to_workspace_edit(filename, violation.get("fix")),
        )


def _edit_from_record(record: Dict[str, Any]) -> TextEdit:
    location = record["location"]
    end_location = record["end_location"]
    text_range = Range.create(
        location["row"] - 1,
        location["column"],
        end_location["row"] - 1,
        end_location["column"],
    )
    return TextEdit.replace(text_range, record.get("content", ""))


def fix_to_workspace_edit(filename: Optional[str], fix: Optional[Dict[str, Any]]) -> Optional[WorkspaceEdit]:
    """Convert a Ruff fix record into a single-file WorkspaceEdit.

    Handles the flat ``{content, location, end_location}`` record as well
    as the newer ``{edits: [...]}`` form.

    Args:
        filename: File the fix applies to.
        fix: Fix record from Ruff, or None.

    Returns:
        WorkspaceEdit, or None when there is no fix.
    """
    if not fix or not filename:
        return None

    if "edits" in fix:
        edits = tuple(_edit_from_record(edit) for edit in fix["edits"])
    else:
        edits = (_edit_from_record(fix),)
    if not edits:
        return None
    return WorkspaceEdit(changes={path_to_uri(filename): edits})
