"""Tests for subprocess helpers."""

from __future__ import annotations

import asyncio
import os
import sys
import time
from pathlib import Path

import pytest

from venvlint.core.subprocess_runner import CancellationToken, run_command, run_with_input

ECHO_STDIN = "import sys; sys.stdout.write(sys.stdin.read().upper())"
SLEEP = "import sys, time; sys.stdin.read(); time.sleep(30)"


class TestCancellationToken:
    """Tests for CancellationToken."""

    def test_initial_state(self) -> None:
        assert CancellationToken().is_cancellation_requested is False

    def test_cancel(self) -> None:
        token = CancellationToken()
        token.cancel()
        assert token.is_cancellation_requested is True


class TestRunCommand:
    """Tests for run_command."""

    def test_captures_output(self, tmp_path: Path) -> None:
        result = run_command([sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path)
        assert result.returncode == 0
        assert Path(result.stdout.strip()).resolve() == tmp_path.resolve()

    def test_missing_executable(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            run_command([str(tmp_path / "missing-tool")])


class TestRunWithInput:
    """Tests for run_with_input."""

    @pytest.mark.asyncio
    async def test_streams_input(self) -> None:
        output = await run_with_input([sys.executable, "-c", ECHO_STDIN], "import os\n")
        assert output == "IMPORT OS\n"

    @pytest.mark.asyncio
    async def test_stderr_merged(self) -> None:
        output = await run_with_input(
            [sys.executable, "-c", "import sys; sys.stderr.write('oops')"],
            "",
            token=CancellationToken(),
        )
        assert output == "oops"

    @pytest.mark.asyncio
    async def test_cancel_kills_process(self) -> None:
        """Test cancelling the token terminates the process promptly."""
        token = CancellationToken()

        async def cancel_soon() -> None:
            await asyncio.sleep(0.2)
            token.cancel()

        started = time.monotonic()
        canceller = asyncio.ensure_future(cancel_soon())
        output = await run_with_input([sys.executable, "-c", SLEEP], "", token=token)
        await canceller

        assert output is None
        assert time.monotonic() - started < 20

    @pytest.mark.asyncio
    async def test_missing_executable(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            await run_with_input([str(tmp_path / "missing-tool")], "")


class TestRunWithInputTaskCancellation:
    """Tests for cancelling the task that awaits run_with_input."""

    @pytest.mark.asyncio
    @pytest.mark.skipif(sys.platform == "win32", reason="uses POSIX signal 0 to check the pid")
    async def test_child_killed_and_reaped(self, tmp_path: Path) -> None:
        """Test the child process does not outlive a cancelled task."""
        pid_file = tmp_path / "child.pid"
        script = (
            "import os, sys, time; "
            f"open({str(pid_file)!r}, 'w').write(str(os.getpid())); "
            "sys.stdin.read(); time.sleep(30)"
        )
        task = asyncio.ensure_future(
            run_with_input([sys.executable, "-c", script], "", token=CancellationToken())
        )

        deadline = time.monotonic() + 10
        while not (pid_file.exists() and pid_file.read_text()):
            assert time.monotonic() < deadline, "child did not start"
            await asyncio.sleep(0.05)
        pid = int(pid_file.read_text())

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        with pytest.raises(ProcessLookupError):
            os.kill(pid, 0)

    @pytest.mark.asyncio
    async def test_cancel_without_token(self) -> None:
        """Test cancellation also cleans up when no token was given."""
        task = asyncio.ensure_future(run_with_input([sys.executable, "-c", SLEEP], ""))
        await asyncio.sleep(0.2)

        task.cancel()
        started = time.monotonic()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert time.monotonic() - started < 20
