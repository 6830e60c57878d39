"""File watcher that reloads a YAML configuration store on change."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from venvlint.config.loader import ConfigError
from venvlint.config.store import YamlConfigurationStore
from venvlint.core.logging import get_logger

LOGGER = get_logger(__name__)


class ConfigFileWatcher:
    """Watches a store's config file and calls ``store.reload()`` on change."""

    def __init__(self, store: YamlConfigurationStore):
        """Initialize ConfigFileWatcher.

        Args:
            store: File-backed configuration store to keep in sync.
        """
        self.store = store
        self._observer: Optional[Observer] = None  # type: ignore[valid-type]

    @property
    def running(self) -> bool:
        return self._observer is not None

    def start(self) -> None:
        """Start watching the config file's directory."""
        if self._observer is not None:
            LOGGER.warning("Config watcher already running")
            return

        handler = _ConfigFileHandler(self.store.path, self._on_config_change)
        observer = Observer()
        observer.schedule(handler, str(self.store.path.parent), recursive=False)
        observer.start()
        self._observer = observer
        LOGGER.info(f"Watching {self.store.path} for changes...")

    def stop(self) -> None:
        """Stop the watcher."""
        if self._observer is not None:
            self._observer.stop()
            self._observer.join()
            self._observer = None
            LOGGER.info("Config watcher stopped")

    def __enter__(self) -> "ConfigFileWatcher":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def _on_config_change(self) -> None:
        try:
            self.store.reload()
        except ConfigError as e:
            LOGGER.error(f"Failed to reload configuration: {e}")


class _ConfigFileHandler(FileSystemEventHandler):
    """Watchdog event handler filtering events down to one file."""

    def __init__(self, path: Path, callback: Callable[[], None]):
        """Initialize handler.

        Args:
            path: The watched config file.
            callback: Function to call when the file changes.
        """
        self.path = path.resolve()
        self.callback = callback

    def _matches(self, event) -> bool:
        if event.is_directory:
            return False
        paths = [event.src_path, getattr(event, "dest_path", "")]
        return any(p and Path(str(p)).resolve() == self.path for p in paths)

    def on_modified(self, event):
        """Handle file modification."""
        if self._matches(event):
            self.callback()

    def on_created(self, event):
        """Handle file creation."""
        if self._matches(event):
            self.callback()

    def on_moved(self, event):
        """Handle editors that save by renaming a temp file over the original."""
        if self._matches(event):
            self.callback()
