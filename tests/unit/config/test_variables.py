"""Tests for configuration variable substitution."""

from __future__ import annotations

import os
from pathlib import Path

from venvlint.config.variables import SystemVariables


class TestSystemVariables:
    """Tests for SystemVariables.resolve."""

    def test_workspace_folder(self, tmp_path: Path) -> None:
        variables = SystemVariables(tmp_path, env={})
        assert variables.resolve("${workspaceFolder}/.venv/bin/python") == f"{tmp_path}/.venv/bin/python"

    def test_workspace_root_alias(self, tmp_path: Path) -> None:
        variables = SystemVariables(tmp_path, env={})
        assert variables.resolve("${workspaceRoot}") == str(tmp_path)

    def test_workspace_basename(self, tmp_path: Path) -> None:
        variables = SystemVariables(tmp_path, env={})
        assert variables.resolve("${workspaceFolderBasename}") == tmp_path.name

    def test_cwd(self) -> None:
        assert SystemVariables(env={}).resolve("${cwd}") == os.getcwd()

    def test_env_namespace(self) -> None:
        variables = SystemVariables(env={"HOME": "/home/u"})
        assert variables.resolve("${env:HOME}/bin") == "/home/u/bin"

    def test_env_namespace_unset_is_empty(self) -> None:
        assert SystemVariables(env={}).resolve("x${env:MISSING}y") == "xy"

    def test_plain_env_variable(self) -> None:
        variables = SystemVariables(env={"TOOLS": "/opt/tools"})
        assert variables.resolve("${TOOLS}/ruff") == "/opt/tools/ruff"

    def test_default_value(self) -> None:
        variables = SystemVariables(env={})
        assert variables.resolve("${TOOLS:-/usr/local}/ruff") == "/usr/local/ruff"

    def test_env_overrides_default(self) -> None:
        variables = SystemVariables(env={"TOOLS": "/opt"})
        assert variables.resolve("${TOOLS:-/usr/local}") == "/opt"

    def test_unknown_left_untouched(self) -> None:
        """Test unknown placeholders survive substitution."""
        assert SystemVariables(env={}).resolve("${unknownThing}") == "${unknownThing}"

    def test_workspace_folder_without_root(self) -> None:
        assert SystemVariables(env={}).resolve("${workspaceFolder}") == "${workspaceFolder}"


class TestResolveAny:
    """Tests for SystemVariables.resolve_any."""

    def test_nested(self, tmp_path: Path) -> None:
        variables = SystemVariables(tmp_path, env={"CFG": "setup.cfg"})
        value = {
            "ruffPath": "${workspaceFolder}/bin/ruff",
            "ruffArgs": ["--config", "${CFG}"],
            "enabled": True,
            "maxNumberOfProblems": 10,
        }
        assert variables.resolve_any(value) == {
            "ruffPath": f"{tmp_path}/bin/ruff",
            "ruffArgs": ["--config", "setup.cfg"],
            "enabled": True,
            "maxNumberOfProblems": 10,
        }

    def test_none(self) -> None:
        assert SystemVariables(env={}).resolve_any(None) is None
