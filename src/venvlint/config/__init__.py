"""Configuration plumbing: settings models, stores, validation and watching."""

from venvlint.config.loader import ConfigError, find_project_config, load_yaml_file
from venvlint.config.models import FormattingSettings, LintingSettings, SortImportSettings
from venvlint.config.store import (
    ConfigurationChangeEvent,
    ConfigurationStore,
    YamlConfigurationStore,
)
from venvlint.config.variables import SystemVariables

__all__ = [
    "ConfigError",
    "ConfigurationChangeEvent",
    "ConfigurationStore",
    "FormattingSettings",
    "LintingSettings",
    "SortImportSettings",
    "SystemVariables",
    "YamlConfigurationStore",
    "find_project_config",
    "load_yaml_file",
]
