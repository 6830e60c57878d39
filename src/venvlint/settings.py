"""Per-workspace Python settings.

``PythonSettings`` turns the ``python`` configuration section into
resolved interpreter and tool paths, and keeps them current by listening
to the store's change events. ``SettingsRegistry`` owns one instance per
workspace and tears them all down together.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Optional

from venvlint.config.models import FormattingSettings, LintingSettings, SortImportSettings
from venvlint.config.store import ConfigurationChangeEvent, ConfigurationStore
from venvlint.config.variables import SystemVariables
from venvlint.core.events import Disposable
from venvlint.core.logging import get_logger
from venvlint.environment.executable import get_python_executable, get_site_packages
from venvlint.environment.resolver import find_environment_interpreter

LOGGER = get_logger(__name__)

SECTION = "python"
DEFAULT_PYTHON_PATH = "python"


class PythonSettings:
    """Resolved ``python.*`` settings for one workspace."""

    def __init__(
        self,
        workspace_root: Path,
        store: ConfigurationStore,
        env: Optional[MutableMapping[str, str]] = None,
    ):
        """Read the initial configuration and subscribe to changes.

        Args:
            workspace_root: Root directory of the workspace.
            store: Configuration store holding the ``python`` section.
            env: Environment mapping used for probing and variable
                substitution (defaults to ``os.environ``).
        """
        self.workspace_root = workspace_root
        self._store = store
        self._env = env if env is not None else os.environ
        self._disposables: List[Disposable] = []

        self._python_path = ""
        # pythonPath as configured; python_path may point into a venv instead
        self._config_python_path = ""
        self._std_libs: List[str] = []
        self._config_std_libs: List[str] = []

        self.linting = LintingSettings()
        self.formatting = FormattingSettings()
        self.sort_imports = SortImportSettings()

        self._initialize()

    def _initialize(self) -> None:
        self._disposables.append(
            self._store.on_did_change_configuration(self._on_configuration_change)
        )
        self.update(self._store.get_configuration(SECTION))

    def _on_configuration_change(self, event: ConfigurationChangeEvent) -> None:
        if event.affects_configuration(SECTION):
            LOGGER.debug(f"Reloading python settings for {self.workspace_root}")
            self.update(self._store.get_configuration(SECTION))

    def update(self, section: Dict[str, Any]) -> None:
        """Apply a ``python`` configuration section.

        Args:
            section: The ``python`` section (camelCase keys).
        """
        if not isinstance(section, Mapping):
            LOGGER.warning(f"Ignoring python settings: expected a mapping, got {type(section).__name__}")
            section = {}
        system_variables = SystemVariables(self.workspace_root, self._env)
        python_path = section.get("pythonPath") or DEFAULT_PYTHON_PATH
        if not isinstance(python_path, str):
            LOGGER.warning(
                f"Ignoring pythonPath: expected str, got {type(python_path).__name__}"
            )
            python_path = DEFAULT_PYTHON_PATH
        configured = system_variables.resolve(python_path)
        found = find_environment_interpreter(self.workspace_root, self._env)

        self.python_path = found or configured
        self.config_python_path = configured

        self.linting = LintingSettings.from_dict(system_variables.resolve_any(section.get("linting")))
        self.formatting = FormattingSettings.from_dict(system_variables.resolve_any(section.get("formatting")))
        self.sort_imports = SortImportSettings.from_dict(system_variables.resolve_any(section.get("sortImports")))
        for settings in (self.linting, self.formatting, self.sort_imports):
            for name, value in settings.iter_paths():
                setattr(settings, name, self.get_absolute_path(value))

    @property
    def python_path(self) -> str:
        return self._python_path

    @python_path.setter
    def python_path(self, value: str) -> None:
        if self._python_path == value:
            return
        try:
            self._python_path = get_python_executable(value)
            self._std_libs = get_site_packages(self._python_path)
        except Exception as e:
            LOGGER.warning(f"Failed to resolve interpreter {value}: {e}")
            self._python_path = value

    @property
    def config_python_path(self) -> str:
        return self._config_python_path

    @config_python_path.setter
    def config_python_path(self, value: str) -> None:
        if self._config_python_path == value:
            return
        try:
            self._config_python_path = get_python_executable(value)
            self._config_std_libs = get_site_packages(self._config_python_path)
        except Exception as e:
            LOGGER.warning(f"Failed to resolve interpreter {value}: {e}")
            self._config_python_path = value

    @property
    def std_libs(self) -> List[str]:
        return self._std_libs

    @property
    def config_std_libs(self) -> List[str]:
        return self._config_std_libs

    def get_absolute_path(self, path_to_check: str, root_dir: Optional[Path] = None) -> str:
        """Make a tool path absolute relative to the workspace.

        Bare command names are returned unchanged so they resolve via PATH.
        """
        root = root_dir or self.workspace_root
        path_to_check = os.path.expanduser(path_to_check)
        if os.sep not in path_to_check:
            return path_to_check
        if os.path.isabs(path_to_check):
            return path_to_check
        return str((root / path_to_check).resolve())

    def dispose(self) -> None:
        for disposable in self._disposables:
            disposable.dispose()
        self._disposables = []


class SettingsRegistry:
    """Owns one PythonSettings per workspace identifier."""

    def __init__(
        self,
        store: ConfigurationStore,
        env: Optional[MutableMapping[str, str]] = None,
    ):
        self._store = store
        self._env = env
        self._settings: Dict[str, PythonSettings] = {}

    def __contains__(self, workspace_id: str) -> bool:
        return workspace_id in self._settings

    def __len__(self) -> int:
        return len(self._settings)

    def get(self, workspace_id: str, workspace_root: Path) -> PythonSettings:
        """Return the settings for a workspace, creating them on first use."""
        settings = self._settings.get(workspace_id)
        if settings is None:
            settings = PythonSettings(workspace_root, self._store, self._env)
            self._settings[workspace_id] = settings
        return settings

    def dispose(self) -> None:
        """Dispose every workspace's settings and forget them."""
        for settings in self._settings.values():
            settings.dispose()
        self._settings.clear()

    def __enter__(self) -> "SettingsRegistry":
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()
