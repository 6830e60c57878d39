"""Variable substitution for configuration values.

Supports the editor-style placeholders users put in their settings:

- ``${workspaceFolder}`` / ``${workspaceRoot}``: the workspace root
- ``${workspaceFolderBasename}``: the root's directory name
- ``${cwd}``: the process working directory
- ``${env:NAME}``: an environment variable (empty when unset)
- ``${NAME}`` / ``${NAME:-default}``: shell-style environment expansion
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

# ${name}, ${env:NAME}, ${NAME:-default}
VARIABLE_PATTERN = re.compile(r"\$\{(?:(env):)?([^}:]+)(?::-([^}]*))?\}")


class SystemVariables:
    """Resolves placeholders against a workspace root and an environment."""

    def __init__(
        self,
        workspace_root: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
    ):
        self._env = env if env is not None else os.environ
        self._values: Dict[str, str] = {"cwd": os.getcwd()}
        if workspace_root is not None:
            root = str(workspace_root)
            self._values["workspaceFolder"] = root
            self._values["workspaceRoot"] = root
            self._values["workspaceFolderBasename"] = Path(root).name

    def resolve(self, value: str) -> str:
        """Substitute every known placeholder in ``value``.

        Unknown names that are not set in the environment are left as-is
        unless a default is given.
        """

        def _replace(match: re.Match) -> str:
            namespace, name, default = match.group(1), match.group(2), match.group(3)
            if namespace == "env":
                return self._env.get(name, "")
            if name in self._values:
                return self._values[name]
            if name in self._env:
                return self._env[name]
            if default is not None:
                return default
            return match.group(0)

        return VARIABLE_PATTERN.sub(_replace, value)

    def resolve_any(self, value: Any) -> Any:
        """Resolve placeholders in strings nested inside dicts and lists."""
        if isinstance(value, str):
            return self.resolve(value)
        if isinstance(value, dict):
            return {key: self.resolve_any(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self.resolve_any(item) for item in value]
        return value
