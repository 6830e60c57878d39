"""Tests for configuration validation."""

from __future__ import annotations

from pathlib import Path

from venvlint.config.validation import (
    VALID_PYTHON_KEYS,
    validate_config,
    validate_config_file,
)


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid_config(self) -> None:
        data = {
            "python": {
                "pythonPath": "${workspaceFolder}/.venv/bin/python",
                "linting": {"ruffEnabled": True, "ruffArgs": ["--select", "F"]},
                "formatting": {"provider": "black"},
                "sortImports": {"path": "isort"},
            }
        }
        assert validate_config(data, source="test.yml") == []

    def test_other_namespaces_ignored(self) -> None:
        """Test settings of other extensions are not validated."""
        assert validate_config({"editor": {"tabSize": 4}}, source="test.yml") == []

    def test_unknown_python_key_with_suggestion(self) -> None:
        warnings = validate_config({"python": {"pythonPth": "python3"}}, source="test.yml")

        assert len(warnings) == 1
        assert warnings[0].key == "python.pythonPth"
        assert warnings[0].suggestion == "pythonPath"
        assert "did you mean 'pythonPath'" in warnings[0].message

    def test_unknown_linting_key(self) -> None:
        warnings = validate_config({"python": {"linting": {"ruffEnabeld": True}}}, source="test.yml")

        assert len(warnings) == 1
        assert warnings[0].key == "python.linting.ruffEnabeld"
        assert warnings[0].suggestion == "ruffEnabled"

    def test_unknown_key_without_suggestion(self) -> None:
        warnings = validate_config({"python": {"zzzzzz": 1}}, source="test.yml")
        assert warnings[0].suggestion is None
        assert warnings[0].message == "Unknown key 'python.zzzzzz'"

    def test_python_not_mapping(self) -> None:
        warnings = validate_config({"python": "3.11"}, source="test.yml")
        assert len(warnings) == 1
        assert warnings[0].key == "python"

    def test_python_path_not_string(self) -> None:
        warnings = validate_config({"python": {"pythonPath": 3}}, source="test.yml")
        assert [w.key for w in warnings] == ["python.pythonPath"]

    def test_section_not_mapping(self) -> None:
        warnings = validate_config({"python": {"linting": ["ruff"]}}, source="test.yml")
        assert [w.key for w in warnings] == ["python.linting"]

    def test_path_setting_not_string(self) -> None:
        """Test a non-string tool path is reported under its full key."""
        warnings = validate_config({"python": {"linting": {"ruffPath": 5}}}, source="test.yml")

        assert [w.key for w in warnings] == ["python.linting.ruffPath"]
        assert "expected str, got int" in warnings[0].message

    def test_wrong_types_in_sections(self) -> None:
        data = {
            "python": {
                "linting": {"maxNumberOfProblems": True, "ruffArgs": ["--select", 1]},
                "sortImports": {"path": ["isort"]},
            }
        }
        keys = [w.key for w in validate_config(data, source="test.yml")]
        assert keys == [
            "python.linting.maxNumberOfProblems",
            "python.linting.ruffArgs",
            "python.sortImports.path",
        ]

    def test_root_not_mapping(self) -> None:
        warnings = validate_config(["python"], source="test.yml")  # type: ignore[arg-type]
        assert len(warnings) == 1
        assert "must be a mapping" in warnings[0].message

    def test_source_recorded(self) -> None:
        warnings = validate_config({"python": {"bogus": 1}}, source="/ws/.venvlint.yml")
        assert warnings[0].source == "/ws/.venvlint.yml"

    def test_python_keys(self) -> None:
        assert VALID_PYTHON_KEYS == {"pythonPath", "linting", "formatting", "sortImports"}


class TestValidateConfigFile:
    """Tests for validate_config_file."""

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / ".venvlint.yml"
        path.write_text("python:\n  linting:\n    ruffEnabled: true\n")
        assert validate_config_file(path) == []

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / ".venvlint.yml"
        path.write_text("python: [unclosed\n")
        warnings = validate_config_file(path)
        assert len(warnings) == 1
        assert "Failed to load config" in warnings[0].message

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / ".venvlint.yml"
        path.write_text("")
        assert validate_config_file(path) == []
