"""Conversion of lint messages into host diagnostics.

The host expects LSP-shaped diagnostics grouped by document URI, plus
workspace edits for the messages that carry a fix.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from venvlint.core.models import (
    LintMessage,
    LintMessageSeverity,
    Position,
    Range,
    WorkspaceEdit,
    path_to_uri,
)

# LSP DiagnosticSeverity values
LSP_SEVERITY: Dict[LintMessageSeverity, int] = {
    LintMessageSeverity.ERROR: 1,
    LintMessageSeverity.WARNING: 2,
    LintMessageSeverity.INFORMATION: 3,
    LintMessageSeverity.HINT: 4,
}


def message_range(message: LintMessage) -> Range:
    """Editor range for a message.

    The start is ``(line - 1, column)``. The end uses the reported end
    position when the linter gave one, otherwise it collapses onto the
    start.
    """
    start = Position(max(message.line - 1, 0), max(message.column, 0))
    end = start
    if message.end_line and message.end_column is not None:
        end = Position(message.end_line - 1, message.end_column)
    return Range(start, end)


def to_diagnostic(message: LintMessage) -> Dict[str, Any]:
    diagnostic: Dict[str, Any] = {
        "range": message_range(message).to_dict(),
        "severity": LSP_SEVERITY[message.severity],
        "source": message.provider,
        "message": message.message,
    }
    if message.code:
        diagnostic["code"] = message.code
    if message.tags:
        diagnostic["tags"] = [int(tag) for tag in message.tags]
    return diagnostic


def to_diagnostics(
    messages: List[LintMessage],
    default_uri: Optional[str] = None,
) -> Dict[str, List[Dict[str, Any]]]:
    """Group diagnostics by document URI.

    Args:
        messages: Lint messages to convert.
        default_uri: URI used for messages without a file.

    Returns:
        Mapping of URI to LSP diagnostic dicts, in message order.
    """
    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for message in messages:
        uri = path_to_uri(message.file) if message.file else default_uri
        if uri is None:
            continue
        grouped.setdefault(uri, []).append(to_diagnostic(message))
    return grouped


def collect_fixes(messages: List[LintMessage]) -> List[WorkspaceEdit]:
    """Return the fix edits of autofixable messages, in message order."""
    return [message.fix for message in messages if message.fix is not None]
