"""Unit tests for BaseLinter."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional
from unittest.mock import AsyncMock, patch

import pytest

from venvlint.core.models import LintMessage, LintMessageSeverity, TextDocument
from venvlint.core.subprocess_runner import CancellationToken
from venvlint.plugins.linters.base import BaseLinter, LinterInfo


class EchoLinter(BaseLinter):
    """Minimal text linter used to exercise the base class."""

    REGEX = re.compile(r"(?P<line>\d+):(?P<column>\d+):(?P<type>\w+):(?P<code>\w+):(?P<message>.*)$")

    def __init__(self, settings, column_offset: int = 1):
        super().__init__(settings, column_offset)

    @property
    def name(self) -> str:
        return "flake8"

    async def run_linter(
        self,
        document: TextDocument,
        token: Optional[CancellationToken],
    ) -> List[LintMessage]:
        return await self.run(["-"], document, token)


class TestLinterInfo:
    """Tests for LinterInfo resolution."""

    def test_info_reads_settings(self, make_settings) -> None:
        """Test enabled flag, path and args come from python.linting."""
        settings = make_settings({
            "linting": {
                "flake8Enabled": True,
                "flake8Path": "/opt/tools/flake8",
                "flake8Args": ["--select=E"],
            }
        })
        info = EchoLinter(settings).info

        assert info == LinterInfo(
            id="flake8",
            enabled=True,
            path="/opt/tools/flake8",
            args=["--select=E"],
            category_severity={"E": "Error", "W": "Warning", "F": "Warning"},
        )


class TestExecutable:
    """Tests for executable selection."""

    def test_explicit_path_used_as_is(self, make_settings) -> None:
        settings = make_settings({"linting": {"flake8Path": "/opt/tools/flake8"}})
        assert EchoLinter(settings).executable() == "/opt/tools/flake8"

    def test_bare_name_prefers_interpreter_sibling(self, make_settings, tmp_path: Path) -> None:
        """Test a tool installed in the venv's bin directory wins."""
        bin_dir = tmp_path / ".venv" / "bin"
        bin_dir.mkdir(parents=True)
        (bin_dir / "python").touch()
        (bin_dir / "flake8").touch()

        settings = make_settings({"pythonPath": str(bin_dir / "python")})
        assert EchoLinter(settings).executable() == str(bin_dir / "flake8")

    def test_bare_name_without_sibling(self, make_settings) -> None:
        settings = make_settings()
        assert EchoLinter(settings).executable() == "flake8"


class TestParseLine:
    """Tests for regex-based parsing."""

    def test_column_offset_subtracted(self, make_settings) -> None:
        linter = EchoLinter(make_settings(), column_offset=1)
        message = linter.parse_line("4:9:W:W291:trailing whitespace")

        assert message is not None
        assert message.line == 4
        assert message.column == 8
        assert message.severity == LintMessageSeverity.WARNING

    def test_zero_offset(self, make_settings) -> None:
        linter = EchoLinter(make_settings(), column_offset=0)
        message = linter.parse_line("4:9:W:W291:trailing whitespace")
        assert message is not None
        assert message.column == 9

    def test_no_match(self, make_settings) -> None:
        assert EchoLinter(make_settings()).parse_line("garbage") is None

    def test_unknown_severity_falls_back_to_error(self, make_settings) -> None:
        """Test an invalid configured severity is ignored."""
        settings = make_settings({"linting": {"flake8CategorySeverity": {"W": "Loud"}}})
        linter = EchoLinter(settings)
        assert linter.severity_for("W") == LintMessageSeverity.ERROR


class TestRun:
    """Tests for BaseLinter.run."""

    @pytest.mark.asyncio
    async def test_document_path_filled_in(self, make_settings, tmp_path: Path) -> None:
        """Test messages without a file are attributed to the document."""
        linter = EchoLinter(make_settings())
        document = TextDocument(path=tmp_path / "mod.py", text="x = 1\n")

        with patch(
            "venvlint.plugins.linters.base.run_with_input",
            new=AsyncMock(return_value="1:1:E:E111:indent\n"),
        ) as mock_run:
            messages = await linter.lint(document)

        assert mock_run.call_args[0][0] == ["flake8", "-"]
        assert messages[0].file == str(tmp_path / "mod.py")

    @pytest.mark.asyncio
    async def test_spawn_error_logged(
        self,
        make_settings,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test an OSError from the spawn is logged and yields nothing."""
        linter = EchoLinter(make_settings())
        document = TextDocument(path=tmp_path / "mod.py", text="")

        with patch(
            "venvlint.plugins.linters.base.run_with_input",
            new=AsyncMock(side_effect=PermissionError("denied")),
        ):
            with caplog.at_level("ERROR"):
                messages = await linter.lint(document)

        assert messages == []
        assert "Linting with flake8 failed" in caplog.text

    @pytest.mark.asyncio
    async def test_token_passed_through(self, make_settings, tmp_path: Path) -> None:
        linter = EchoLinter(make_settings())
        document = TextDocument(path=tmp_path / "mod.py", text="")
        token = CancellationToken()

        with patch(
            "venvlint.plugins.linters.base.run_with_input",
            new=AsyncMock(return_value=""),
        ) as mock_run:
            await linter.lint(document, token)

        assert mock_run.call_args.kwargs["token"] is token
