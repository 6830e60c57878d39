"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional
from unittest.mock import patch

import pytest

from venvlint.config.store import ConfigurationStore
from venvlint.core.logging import PACKAGE_LOGGER
from venvlint.settings import PythonSettings


@pytest.fixture
def make_settings(tmp_path: Path) -> Callable[..., PythonSettings]:
    """Factory for PythonSettings that never spawns an interpreter.

    Interpreter probing, validation and site-packages lookup are stubbed,
    so the configured python path is used verbatim.
    """
    created = []

    def _make(
        python: Optional[Dict[str, Any]] = None,
        root: Optional[Path] = None,
    ) -> PythonSettings:
        store = ConfigurationStore({"python": python or {}})
        with patch("venvlint.settings.find_environment_interpreter", return_value=None), \
             patch("venvlint.settings.get_python_executable", side_effect=lambda p: p), \
             patch("venvlint.settings.get_site_packages", return_value=[]):
            settings = PythonSettings(root or tmp_path, store, env={})
        created.append(settings)
        return settings

    yield _make

    for settings in created:
        settings.dispose()


@pytest.fixture(autouse=True)
def package_logger():
    """Restore the venvlint logger after tests that run the CLI."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
