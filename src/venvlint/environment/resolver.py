"""Active interpreter resolution for a workspace."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import MutableMapping, Optional, Sequence

from venvlint.core.logging import get_logger
from venvlint.environment.executable import get_python_executable
from venvlint.environment.probes import (
    DEFAULT_PROBES,
    EnvironmentSnapshot,
    Probe,
    run_probes,
)

LOGGER = get_logger(__name__)


def find_environment_interpreter(
    workspace_root: Path,
    env: Optional[MutableMapping[str, str]] = None,
    probes: Sequence[Probe] = DEFAULT_PROBES,
    platform: str = sys.platform,
) -> Optional[str]:
    """Run the probe chain for a workspace.

    Returns:
        The interpreter of the detected environment, or None.
    """
    snapshot = EnvironmentSnapshot(
        workspace_root=workspace_root,
        env=env if env is not None else os.environ,
        platform=platform,
    )
    return run_probes(snapshot, probes)


def resolve_interpreter(
    workspace_root: Path,
    env: Optional[MutableMapping[str, str]] = None,
    configured_path: str = "python",
    probes: Sequence[Probe] = DEFAULT_PROBES,
) -> str:
    """Determine the Python interpreter to use for a workspace.

    Environment probes (virtualenv, conda, pyenv, pipenv, poetry, local
    venv) take priority; otherwise the configured path is resolved via
    PATH lookup. Never raises for probe or validation failures.

    Args:
        workspace_root: Root directory of the workspace.
        env: Environment mapping to read (and write PYENV_VERSION to).
        configured_path: Interpreter from configuration.
        probes: Ordered probe functions.

    Returns:
        Interpreter path.
    """
    found = find_environment_interpreter(workspace_root, env, probes)
    python_path = get_python_executable(found or configured_path)
    LOGGER.info(f"Using Python interpreter {python_path}")
    return python_path
