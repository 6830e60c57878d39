"""Plugin discovery via Python entry points.

Third-party packages can ship extra linter adapters:

    [project.entry-points."venvlint.linters"]
    mylinter = "mypackage.linter:MyLinter"
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import Dict, Type, TypeVar

from venvlint.core.logging import get_logger

LOGGER = get_logger(__name__)

LINTER_ENTRY_POINT_GROUP = "venvlint.linters"

T = TypeVar("T")


def discover_plugins(group: str, base_class: Type[T] | None = None) -> Dict[str, Type[T]]:
    """Discover all installed plugins for a given entry point group.

    Args:
        group: Entry point group name (e.g., 'venvlint.linters').
        base_class: Optional base class to validate plugins against.

    Returns:
        Dictionary mapping plugin names to plugin classes.
    """
    plugins: Dict[str, Type[T]] = {}

    for ep in entry_points(group=group):
        try:
            plugin_class = ep.load()
            if base_class is not None and not (
                isinstance(plugin_class, type) and issubclass(plugin_class, base_class)
            ):
                LOGGER.warning(
                    f"Plugin '{ep.name}' does not inherit from {base_class.__name__}, skipping"
                )
                continue
            plugins[ep.name] = plugin_class
            LOGGER.debug(f"Discovered plugin: {ep.name} (group: {group})")
        except Exception as e:
            LOGGER.warning(f"Failed to load plugin '{ep.name}': {e}")

    return plugins
