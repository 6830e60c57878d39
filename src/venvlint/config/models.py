"""Typed settings for the ``python`` configuration namespace.

The host stores settings with camelCase keys (``python.linting.ruffPath``).
Each dataclass here is built from such a section with ``from_dict``;
unknown keys are ignored here and reported by ``validate_config``.
"""

from __future__ import annotations

import re
from dataclasses import MISSING, dataclass, field, fields
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Type, TypeVar

from venvlint.core.logging import get_logger

LOGGER = get_logger(__name__)

S = TypeVar("S", bound="_SectionSettings")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def camel_to_snake(key: str) -> str:
    """Convert a camelCase settings key to a snake_case attribute name."""
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


def snake_to_camel(name: str) -> str:
    """Convert a snake_case attribute name to its camelCase settings key."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def value_type_error(value: Any, expected: type) -> Optional[str]:
    """Describe why ``value`` cannot be used for a setting of type ``expected``.

    Returns None when the value is usable. Booleans are not accepted for
    integer settings and list settings must hold strings only.
    """
    if (expected is int and isinstance(value, bool)) or not isinstance(value, expected):
        return f"expected {expected.__name__}, got {type(value).__name__}"
    if expected is list and not all(isinstance(item, str) for item in value):
        return "expected a list of strings"
    return None


class _SectionSettings:
    """Shared construction and path handling for settings sections."""

    @classmethod
    def from_dict(cls: Type[S], data: Optional[Mapping[str, Any]]) -> S:
        """Build settings from a camelCase mapping.

        Values of the wrong type are dropped with a warning, so the
        default for that key applies.

        Args:
            data: Section mapping from the configuration store.

        Returns:
            Settings instance with defaults for missing keys.
        """
        if data is not None and not isinstance(data, Mapping):
            LOGGER.warning(f"Ignoring {cls.__name__} settings: expected a mapping, got {type(data).__name__}")
            data = None

        types = cls.field_types()
        kwargs: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            expected = types.get(key)
            if expected is None or value is None:
                continue
            error = value_type_error(value, expected)
            if error:
                LOGGER.warning(f"Ignoring setting '{key}': {error}")
                continue
            kwargs[camel_to_snake(key)] = value
        return cls(**kwargs)

    @classmethod
    def field_types(cls) -> Dict[str, type]:
        """Map each camelCase key to the type of its default value."""
        types: Dict[str, type] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            if f.default is not MISSING:
                default = f.default
            else:
                default = f.default_factory()  # type: ignore[misc]
            types[snake_to_camel(f.name)] = type(default)
        return types

    @classmethod
    def keys(cls) -> List[str]:
        """Return the camelCase keys this section understands."""
        return [snake_to_camel(f.name) for f in fields(cls)]  # type: ignore[arg-type]

    def iter_paths(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(attribute, value)`` for every executable path setting."""
        for f in fields(self):  # type: ignore[arg-type]
            if f.name == "path" or f.name.endswith("_path"):
                yield f.name, getattr(self, f.name)


@dataclass
class LintingSettings(_SectionSettings):
    """``python.linting`` settings."""

    enabled: bool = True
    lint_on_save: bool = True
    max_number_of_problems: int = 100
    ignore_patterns: List[str] = field(
        default_factory=lambda: ["**/site-packages/**/*.py", ".vscode/*.py"]
    )

    ruff_enabled: bool = False
    ruff_path: str = "ruff"
    ruff_args: List[str] = field(default_factory=list)

    flake8_enabled: bool = False
    flake8_path: str = "flake8"
    flake8_args: List[str] = field(default_factory=list)
    flake8_category_severity: Dict[str, str] = field(
        default_factory=lambda: {"E": "Error", "W": "Warning", "F": "Warning"}
    )

    pylint_enabled: bool = False
    pylint_path: str = "pylint"
    pylint_args: List[str] = field(default_factory=list)
    pylint_category_severity: Dict[str, str] = field(
        default_factory=lambda: {
            "convention": "Information",
            "error": "Error",
            "fatal": "Error",
            "refactor": "Hint",
            "warning": "Warning",
            "info": "Information",
        }
    )

    mypy_enabled: bool = False
    mypy_path: str = "mypy"
    mypy_args: List[str] = field(default_factory=list)
    mypy_category_severity: Dict[str, str] = field(
        default_factory=lambda: {"error": "Error", "note": "Information"}
    )

    # Recognised for path resolution; no adapter ships for these yet.
    pycodestyle_enabled: bool = False
    pycodestyle_path: str = "pycodestyle"
    pyflakes_enabled: bool = False
    pyflakes_path: str = "pyflakes"
    pylama_enabled: bool = False
    pylama_path: str = "pylama"
    prospector_enabled: bool = False
    prospector_path: str = "prospector"
    pydocstyle_enabled: bool = False
    pydocstyle_path: str = "pydocstyle"
    bandit_enabled: bool = False
    bandit_path: str = "bandit"

    def is_enabled(self, linter_id: str) -> bool:
        return bool(getattr(self, f"{linter_id}_enabled", False))

    def tool_path(self, linter_id: str) -> str:
        return getattr(self, f"{linter_id}_path", linter_id)

    def tool_args(self, linter_id: str) -> List[str]:
        return list(getattr(self, f"{linter_id}_args", []))

    def category_severity(self, linter_id: str) -> Dict[str, str]:
        return dict(getattr(self, f"{linter_id}_category_severity", {}))


@dataclass
class FormattingSettings(_SectionSettings):
    """``python.formatting`` settings."""

    provider: str = "autopep8"
    autopep8_path: str = "autopep8"
    autopep8_args: List[str] = field(default_factory=list)
    yapf_path: str = "yapf"
    yapf_args: List[str] = field(default_factory=list)
    black_path: str = "black"
    black_args: List[str] = field(default_factory=list)
    blackd_path: str = "blackd"
    darker_path: str = "darker"
    darker_args: List[str] = field(default_factory=list)


@dataclass
class SortImportSettings(_SectionSettings):
    """``python.sortImports`` settings."""

    path: str = "isort"
    args: List[str] = field(default_factory=list)
