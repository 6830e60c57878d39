"""Plugin infrastructure for venvlint.

Linter adapters are built in and can be extended through the
``venvlint.linters`` entry point group.
"""

from venvlint.plugins.discovery import (
    discover_plugins,
    LINTER_ENTRY_POINT_GROUP,
)

__all__ = [
    "discover_plugins",
    "LINTER_ENTRY_POINT_GROUP",
]
