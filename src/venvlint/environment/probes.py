"""Probes that locate the active Python interpreter for a workspace.

Each probe is a function of an ``EnvironmentSnapshot`` and returns:

- ``None`` when it does not apply, so the next probe runs;
- a non-empty path when it found an interpreter;
- ``NO_INTERPRETER`` (an empty string) when it applies but has nothing to
  offer. This ends the chain and resolution falls back to the configured
  interpreter.

Probes are evaluated in ``DEFAULT_PROBES`` order by ``run_probes``.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, MutableMapping, Optional, Sequence

from venvlint.core.logging import get_logger
from venvlint.core.subprocess_runner import run_command
from venvlint.environment.executable import python_bin_from_path

LOGGER = get_logger(__name__)

NO_INTERPRETER = ""

PYVENV_CFG = "pyvenv.cfg"
PYTHON_VERSION_FILE = ".python-version"
PIPFILE = "Pipfile"
POETRY_LOCK = "poetry.lock"
POETRY_ACTIVATED_MARKER = "(Activated)"

PIPENV_COMMAND = ["pipenv", "--py"]
POETRY_ENV_LIST_COMMAND = ["poetry", "env", "list", "--full-path", "--no-ansi"]


@dataclass
class EnvironmentSnapshot:
    """Workspace state the probes look at.

    ``env`` is the live environment mapping: the pyenv probe writes
    ``PYENV_VERSION`` into it for the tools spawned later.
    """

    workspace_root: Path
    env: MutableMapping[str, str] = field(default_factory=lambda: os.environ)
    platform: str = sys.platform

    def bin_from_prefix(self, prefix: str) -> str:
        return python_bin_from_path(prefix, self.platform) or NO_INTERPRETER


Probe = Callable[[EnvironmentSnapshot], Optional[str]]


def probe_virtualenv(snapshot: EnvironmentSnapshot) -> Optional[str]:
    """Activated virtualenv (``VIRTUAL_ENV`` with a ``pyvenv.cfg``)."""
    venv = snapshot.env.get("VIRTUAL_ENV")
    if not venv or not os.path.exists(os.path.join(venv, PYVENV_CFG)):
        return None
    return snapshot.bin_from_prefix(venv)


def probe_conda(snapshot: EnvironmentSnapshot) -> Optional[str]:
    """Activated conda environment (``CONDA_PREFIX``)."""
    prefix = snapshot.env.get("CONDA_PREFIX")
    if not prefix:
        return None
    return snapshot.bin_from_prefix(prefix)


def probe_pyenv(snapshot: EnvironmentSnapshot) -> Optional[str]:
    """``pyenv local`` marker.

    ``.python-version`` may list several versions; the first one is
    exported as ``PYENV_VERSION`` unless that is already set. No
    interpreter is reported, so the configured one is used (through the
    pyenv shim when it is on PATH).
    """
    version_file = snapshot.workspace_root / PYTHON_VERSION_FILE
    if not version_file.exists():
        return None
    if not snapshot.env.get("PYENV_VERSION"):
        lines = version_file.read_text(encoding="utf-8").strip().split("\n")
        snapshot.env["PYENV_VERSION"] = lines[0].strip()
        LOGGER.debug(f"Using pyenv version {snapshot.env['PYENV_VERSION']}")
    return NO_INTERPRETER


def probe_pipenv(snapshot: EnvironmentSnapshot) -> Optional[str]:
    """Pipenv project: ask ``pipenv --py`` for its interpreter."""
    if not (snapshot.workspace_root / PIPFILE).exists():
        return None
    result = run_command(PIPENV_COMMAND, cwd=snapshot.workspace_root)
    return (result.stdout or "").strip()


def parse_poetry_env_list(output: str) -> str:
    """Pick the environment path from ``poetry env list --full-path`` output.

    The line marked ``(Activated)`` wins; otherwise the last line listed.
    """
    info = ""
    for item in output.strip().split("\n"):
        if POETRY_ACTIVATED_MARKER in item:
            info = item.replace(POETRY_ACTIVATED_MARKER, "", 1).strip()
            break
        info = item.strip()
    return info


def probe_poetry(snapshot: EnvironmentSnapshot) -> Optional[str]:
    """Poetry project: use the activated (or last) environment."""
    if not (snapshot.workspace_root / POETRY_LOCK).exists():
        return None
    result = run_command(POETRY_ENV_LIST_COMMAND, cwd=snapshot.workspace_root)
    info = parse_poetry_env_list(result.stdout or "")
    if not info:
        return None
    return snapshot.bin_from_prefix(info)


def probe_workspace_venv(snapshot: EnvironmentSnapshot) -> Optional[str]:
    """A virtualenv directory directly inside the workspace root."""
    for entry in sorted(os.listdir(snapshot.workspace_root)):
        candidate = snapshot.workspace_root / entry
        if (candidate / PYVENV_CFG).exists():
            return snapshot.bin_from_prefix(str(candidate))
    return None


DEFAULT_PROBES: List[Probe] = [
    probe_virtualenv,
    probe_conda,
    probe_pyenv,
    probe_pipenv,
    probe_poetry,
    probe_workspace_venv,
]


def run_probes(
    snapshot: EnvironmentSnapshot,
    probes: Sequence[Probe] = DEFAULT_PROBES,
) -> Optional[str]:
    """Evaluate probes in order; the first one that applies decides.

    Any exception raised by a probe is logged and ends the chain without
    a result.

    Args:
        snapshot: Workspace state to probe.
        probes: Ordered probe functions.

    Returns:
        Interpreter path, or None when the configured interpreter should
        be used.
    """
    for probe in probes:
        try:
            result = probe(snapshot)
        except Exception as e:
            LOGGER.error(f"Interpreter probe {probe.__name__} failed: {e}")
            return None
        if result is None:
            continue
        if result:
            LOGGER.debug(f"Interpreter probe {probe.__name__} found {result}")
            return result
        LOGGER.debug(f"Interpreter probe {probe.__name__} matched without an interpreter")
        return None
    return None
