"""Python interpreter discovery for workspaces."""

from venvlint.environment.executable import (
    get_python_executable,
    get_site_packages,
    is_valid_python_path,
    python_bin_from_path,
)
from venvlint.environment.probes import EnvironmentSnapshot, run_probes
from venvlint.environment.resolver import find_environment_interpreter, resolve_interpreter

__all__ = [
    "EnvironmentSnapshot",
    "find_environment_interpreter",
    "get_python_executable",
    "get_site_packages",
    "is_valid_python_path",
    "python_bin_from_path",
    "resolve_interpreter",
    "run_probes",
]
