"""Interpreter executable lookup, validation and site-packages discovery."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path
from typing import List, Optional

from venvlint.core.logging import get_logger
from venvlint.core.subprocess_runner import run_command

LOGGER = get_logger(__name__)

VALIDATION_SNIPPET = "print(1234)"
VALIDATION_OUTPUT = "1234"
SITE_PACKAGES_SNIPPET = "import site;print(site.getsitepackages()[0])"
USER_SITE_PACKAGES_SNIPPET = "import site;print(site.getusersitepackages())"


def python_bin_from_path(prefix: str, platform: str = sys.platform) -> Optional[str]:
    """Return the interpreter inside an environment prefix, if present.

    Args:
        prefix: Environment directory (virtualenv, conda prefix, ...).
        platform: ``sys.platform`` value deciding the bin layout.

    Returns:
        Path to the interpreter or None if it does not exist.
    """
    if platform == "win32":
        full_path = os.path.join(prefix, "Scripts", "python.exe")
    else:
        full_path = os.path.join(prefix, "bin", "python")
    return full_path if os.path.exists(full_path) else None


def needs_path_lookup(python_path: str) -> bool:
    """Whether ``python_path`` should be resolved through PATH.

    True for bare command names and for degenerate paths whose last two
    segments are identical.
    """
    return (
        python_path == "python"
        or os.sep not in python_path
        or os.path.basename(python_path) == os.path.dirname(python_path)
    )


def is_valid_python_path(python_path: str) -> bool:
    """Check that ``python_path`` runs a trivial snippet successfully."""
    try:
        result = run_command([python_path, "-c", VALIDATION_SNIPPET])
    except Exception as e:
        LOGGER.debug(f"Interpreter validation failed for {python_path}: {e}")
        return False
    return (result.stdout or "").startswith(VALIDATION_OUTPUT)


def get_python_executable(python_path: str) -> str:
    """Resolve a configured interpreter path.

    Bare names are looked up on PATH. The result is validated, but an
    interpreter that fails validation is still returned.

    Args:
        python_path: Configured interpreter path or command name.

    Returns:
        Absolute path when lookup succeeds, otherwise the expanded input.
    """
    python_path = os.path.expanduser(python_path)

    if needs_path_lookup(python_path):
        found = shutil.which(python_path)
        if found:
            python_path = found

    if not is_valid_python_path(python_path):
        LOGGER.warning(f"Python interpreter {python_path} could not be validated")

    return python_path


def get_site_packages(python_path: str) -> List[str]:
    """Return ``[site_packages, user_site_packages]`` for an interpreter.

    Any failure yields an empty list.
    """
    try:
        site_pkgs = run_command([python_path, "-c", SITE_PACKAGES_SNIPPET])
        user_pkgs = run_command([python_path, "-c", USER_SITE_PACKAGES_SNIPPET])
    except Exception as e:
        LOGGER.debug(f"Site packages lookup failed for {python_path}: {e}")
        return []
    if site_pkgs.returncode != 0 or user_pkgs.returncode != 0:
        LOGGER.debug(f"Site packages lookup failed for {python_path}: {site_pkgs.stderr.strip()}")
        return []
    return [site_pkgs.stdout.strip(), user_pkgs.stdout.strip()]


def find_sibling_executable(python_path: str, name: str) -> Optional[str]:
    """Look for a tool installed next to the interpreter (e.g. ``.venv/bin/ruff``)."""
    if not python_path or os.sep not in python_path:
        return None
    directory = Path(python_path).parent
    candidates = [directory / name]
    if sys.platform == "win32":
        candidates.append(directory / f"{name}.exe")
    for candidate in candidates:
        if candidate.is_file():
            return str(candidate)
    return None
