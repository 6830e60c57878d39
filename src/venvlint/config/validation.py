"""Configuration validation for venvlint.

Warns on unknown keys in the ``python`` namespace, suggests close
matches and flags values of the wrong type. Keys outside that namespace
belong to other extensions and are passed through without validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

import yaml

from venvlint.config.models import (
    FormattingSettings,
    LintingSettings,
    SortImportSettings,
    value_type_error,
)
from venvlint.core.logging import get_logger

LOGGER = get_logger(__name__)

# Valid keys directly under python
VALID_PYTHON_KEYS: Set[str] = {
    "pythonPath",
    "linting",
    "formatting",
    "sortImports",
}

# Valid keys under the python sub-sections
VALID_SECTION_KEYS: Dict[str, Set[str]] = {
    "linting": set(LintingSettings.keys()),
    "formatting": set(FormattingSettings.keys()),
    "sortImports": set(SortImportSettings.keys()),
}

SECTION_TYPES: Dict[str, Dict[str, type]] = {
    "linting": LintingSettings.field_types(),
    "formatting": FormattingSettings.field_types(),
    "sortImports": SortImportSettings.field_types(),
}


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate a configuration tree.

    Does not raise exceptions - returns warnings instead.

    Args:
        data: Config dictionary to validate (top level holds namespaces).
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    if not isinstance(data, dict):
        warnings.append(ConfigValidationWarning(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
        ))
        return warnings

    python = data.get("python")
    if python is None:
        return warnings
    if not isinstance(python, dict):
        warnings.append(ConfigValidationWarning(
            message=f"'python' must be a mapping, got {type(python).__name__}",
            source=source,
            key="python",
        ))
        return warnings

    warnings.extend(_check_keys(python, VALID_PYTHON_KEYS, "python", source))

    path_value = python.get("pythonPath")
    if path_value is not None and not isinstance(path_value, str):
        warnings.append(ConfigValidationWarning(
            message=f"'python.pythonPath' must be a string, got {type(path_value).__name__}",
            source=source,
            key="python.pythonPath",
        ))

    for section, valid_keys in VALID_SECTION_KEYS.items():
        value = python.get(section)
        if value is None:
            continue
        if not isinstance(value, dict):
            warnings.append(ConfigValidationWarning(
                message=f"'python.{section}' must be a mapping, got {type(value).__name__}",
                source=source,
                key=f"python.{section}",
            ))
            continue
        warnings.extend(_check_keys(value, valid_keys, f"python.{section}", source))
        warnings.extend(_check_types(value, SECTION_TYPES[section], f"python.{section}", source))

    return warnings


def validate_config_file(path: Path) -> List[ConfigValidationWarning]:
    """Load and validate a YAML configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        List of validation warnings, including one for unreadable files.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        return [ConfigValidationWarning(message=f"Failed to load config: {e}", source=str(path))]
    return validate_config(data, source=str(path))


def _check_keys(
    data: Dict[str, Any],
    valid_keys: Set[str],
    prefix: str,
    source: str,
) -> List[ConfigValidationWarning]:
    warnings: List[ConfigValidationWarning] = []
    for key in data.keys():
        if key in valid_keys:
            continue
        suggestion = _suggest_key(str(key), valid_keys)
        message = f"Unknown key '{prefix}.{key}'"
        if suggestion:
            message += f" (did you mean '{suggestion}'?)"
        warnings.append(ConfigValidationWarning(
            message=message,
            source=source,
            key=f"{prefix}.{key}",
            suggestion=suggestion,
        ))
    return warnings


def _suggest_key(key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a similar valid key for typos.

    Args:
        key: Unknown key.
        valid_keys: Set of valid keys.

    Returns:
        Closest match or None.
    """
    matches = get_close_matches(key, sorted(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _check_types(
    data: Dict[str, Any],
    types: Dict[str, type],
    prefix: str,
    source: str,
) -> List[ConfigValidationWarning]:
    """Warn on known keys whose values would be ignored for their type."""
    warnings: List[ConfigValidationWarning] = []
    for key, value in data.items():
        expected = types.get(key)
        if expected is None or value is None:
            continue
        error = value_type_error(value, expected)
        if error:
            warnings.append(ConfigValidationWarning(
                message=f"'{prefix}.{key}' has the wrong type: {error}",
                source=source,
                key=f"{prefix}.{key}",
            ))
    return warnings
