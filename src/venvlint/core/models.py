"""Unified data model for lint results and text edits.

Positions and ranges follow editor conventions: lines and characters are
0-based. ``LintMessage`` keeps the 1-based line numbers reported by the
linters; conversion to editor ranges happens in ``venvlint.diagnostics``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


class LintMessageSeverity(str, Enum):
    """Severity levels a linter message can carry."""

    HINT = "Hint"
    ERROR = "Error"
    WARNING = "Warning"
    INFORMATION = "Information"


class DiagnosticTag(IntEnum):
    """Rendering hints understood by the host (LSP values)."""

    UNNECESSARY = 1
    DEPRECATED = 2


@dataclass(frozen=True)
class Position:
    """Zero-based line/character position."""

    line: int
    character: int

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Range:
    """Zero-based half-open range between two positions."""

    start: Position
    end: Position

    @classmethod
    def create(cls, start_line: int, start_character: int, end_line: int, end_character: int) -> "Range":
        return cls(Position(start_line, start_character), Position(end_line, end_character))

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True)
class TextEdit:
    """Replacement of a range of text."""

    range: Range
    new_text: str

    @classmethod
    def replace(cls, range: Range, new_text: str) -> "TextEdit":
        return cls(range=range, new_text=new_text)

    def to_dict(self) -> Dict[str, Any]:
        return {"range": self.range.to_dict(), "newText": self.new_text}


@dataclass(frozen=True)
class WorkspaceEdit:
    """Text edits grouped by document URI."""

    changes: Dict[str, Tuple[TextEdit, ...]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "changes": {
                uri: [edit.to_dict() for edit in edits]
                for uri, edits in self.changes.items()
            }
        }


@dataclass(frozen=True)
class LintMessage:
    """A single finding reported by a linter.

    ``line`` and ``end_line`` are 1-based as reported by the tool.
    ``column`` has already been shifted by the linter's column offset, so
    it is 0-based; ``end_column`` is copied from the tool untouched.
    """

    line: int
    column: int
    code: Optional[str]
    message: str
    severity: LintMessageSeverity
    provider: str
    end_line: Optional[int] = None
    end_column: Optional[int] = None
    type: str = ""
    tags: Tuple[DiagnosticTag, ...] = ()
    file: Optional[str] = None
    fix: Optional[WorkspaceEdit] = None


@dataclass
class TextDocument:
    """The document being linted: its path on disk and current buffer text."""

    path: Path
    text: str
    language_id: str = "python"

    @property
    def uri(self) -> str:
        return path_to_uri(str(self.path))

    @classmethod
    def from_file(cls, path: Path) -> "TextDocument":
        """Load a document from disk.

        Args:
            path: File to read.

        Returns:
            TextDocument with the file contents as buffer text.
        """
        resolved = path.resolve()
        return cls(path=resolved, text=resolved.read_text(encoding="utf-8"))


def path_to_uri(filename: str) -> str:
    """Return a ``file://`` URI for absolute paths, the input otherwise."""
    path = Path(filename)
    if path.is_absolute():
        return path.as_uri()
    return filename

