"""Configuration file discovery and loading.

Handles loading configuration from YAML files with:
- Project-level config (.venvlint.yml in the workspace root)
- An explicit file given on the command line (--config)

The file mirrors the host's settings tree, e.g.::

    python:
      pythonPath: ${workspaceFolder}/.venv/bin/python
      linting:
        ruffEnabled: true
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from venvlint.config.validation import validate_config
from venvlint.core.logging import get_logger

LOGGER = get_logger(__name__)

# Config file names
PROJECT_CONFIG_NAMES = [".venvlint.yml", ".venvlint.yaml", "venvlint.yml", "venvlint.yaml"]


class ConfigError(Exception):
    """Configuration loading or parsing error."""

    pass


def find_project_config(project_root: Path) -> Optional[Path]:
    """Find project config file in project root.

    Args:
        project_root: Project root directory.

    Returns:
        Path to config file or None if not found.
    """
    for name in PROJECT_CONFIG_NAMES:
        config_path = project_root / name
        if config_path.exists():
            return config_path
    return None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and validate a YAML configuration file.

    A missing file yields an empty tree. Validation warnings are logged.

    Args:
        path: Path to YAML file.

    Returns:
        Parsed configuration tree.

    Raises:
        ConfigError: If the file contains invalid YAML or is not a mapping.
    """
    if not path.exists():
        LOGGER.debug(f"Config file not found: {path}")
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    for warning in validate_config(data, source=str(path)):
        LOGGER.warning(f"{warning.source}: {warning.message}")

    return data
