"""Configuration store with change notifications.

The store stands in for the host's configuration service: it holds the
settings tree, hands out deep copies of sections and tells subscribers
which keys changed on every update.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional, Set

from venvlint.config.loader import load_yaml_file
from venvlint.core.events import Disposable, EventEmitter
from venvlint.core.logging import get_logger

LOGGER = get_logger(__name__)


class ConfigurationChangeEvent:
    """Describes which dotted keys changed in a configuration update."""

    def __init__(self, changed_keys: Iterable[str]):
        self.changed_keys: FrozenSet[str] = frozenset(changed_keys)

    def affects_configuration(self, section: str) -> bool:
        """Return True if a changed key is ``section`` or on its path.

        Keys beneath the section and its ancestors both count. Replacing
        ``python`` affects ``python.linting``. A change to
        ``python.formatting`` does not.
        """
        for key in self.changed_keys:
            if key == section or key.startswith(section + ".") or section.startswith(key + "."):
                return True
        return False

    def __repr__(self) -> str:
        return f"ConfigurationChangeEvent({sorted(self.changed_keys)!r})"


def changed_keys(old: Dict[str, Any], new: Dict[str, Any], prefix: str = "") -> Set[str]:
    """Compute the dotted keys that differ between two settings trees.

    Parents of a changed key are reported as changed too.
    """
    changed: Set[str] = set()
    for key in set(old) | set(new):
        dotted = f"{prefix}{key}"
        before, after = old.get(key), new.get(key)
        if isinstance(before, dict) and isinstance(after, dict):
            nested = changed_keys(before, after, prefix=f"{dotted}.")
            if nested:
                changed.add(dotted)
                changed.update(nested)
        elif before != after:
            changed.add(dotted)
    return changed


class ConfigurationStore:
    """In-memory settings tree."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(data or {})
        self._emitter: EventEmitter[ConfigurationChangeEvent] = EventEmitter()

    def get_configuration(self, section: Optional[str] = None) -> Dict[str, Any]:
        """Return a deep copy of a dotted section (the whole tree if None).

        Missing or non-mapping sections yield an empty dict.
        """
        node: Any = self._data
        if section:
            for part in section.split("."):
                if not isinstance(node, dict):
                    return {}
                node = node.get(part)
        if not isinstance(node, dict):
            return {}
        return copy.deepcopy(node)

    def update(self, data: Dict[str, Any]) -> ConfigurationChangeEvent:
        """Replace the settings tree and notify subscribers of changed keys.

        Listeners are only invoked when something actually changed.
        """
        event = ConfigurationChangeEvent(changed_keys(self._data, data))
        self._data = copy.deepcopy(data)
        if event.changed_keys:
            LOGGER.debug(f"Configuration changed: {sorted(event.changed_keys)}")
            self._emitter.fire(event)
        return event

    def on_did_change_configuration(
        self, listener: Callable[[ConfigurationChangeEvent], None]
    ) -> Disposable:
        """Subscribe to configuration changes.

        Args:
            listener: Called with a ConfigurationChangeEvent on each change.

        Returns:
            Disposable that removes the subscription.
        """
        return self._emitter.subscribe(listener)


class YamlConfigurationStore(ConfigurationStore):
    """Settings tree backed by a YAML file."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(load_yaml_file(path))

    def reload(self) -> ConfigurationChangeEvent:
        """Re-read the file and emit a change event if it differs.

        Raises:
            ConfigError: If the file contains invalid YAML.
        """
        LOGGER.debug(f"Reloading configuration from {self.path}")
        return self.update(load_yaml_file(self.path))
