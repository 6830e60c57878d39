"""Subprocess helpers for external tools.

Two flavours are provided:
- ``run_command`` for short synchronous probes (interpreter validation,
  ``pipenv --py``, ``poetry env list``).
- ``run_with_input`` for linter invocations: the document text is fed on
  stdin and the process can be cancelled cooperatively.
"""

from __future__ import annotations

import asyncio
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from venvlint.core.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_TIMEOUT = 30


class CancellationToken:
    """Cooperative cancellation signal for a single request."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        await self._event.wait()


def run_command(
    cmd: List[str],
    cwd: Optional[Union[str, Path]] = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> subprocess.CompletedProcess:
    """Run a command to completion and capture its output.

    Args:
        cmd: Command and arguments to run.
        cwd: Working directory for the command.
        timeout: Timeout in seconds.

    Returns:
        CompletedProcess with text stdout/stderr.

    Raises:
        OSError: If the executable cannot be started.
        subprocess.TimeoutExpired: If the command times out.
    """
    LOGGER.debug(f"Running: {' '.join(cmd)}")
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        cwd=str(cwd) if cwd is not None else None,
        timeout=timeout,
    )


async def _terminate(proc: asyncio.subprocess.Process, communicate: "asyncio.Future") -> None:
    """Kill a running child, then reap it and its pending I/O."""
    if proc.returncode is None:
        try:
            proc.kill()
        except ProcessLookupError:
            pass
    communicate.cancel()
    try:
        await communicate
    except asyncio.CancelledError:
        pass
    await proc.wait()


async def run_with_input(
    cmd: List[str],
    input_text: str,
    cwd: Optional[Union[str, Path]] = None,
    token: Optional[CancellationToken] = None,
) -> Optional[str]:
    """Run a command, stream ``input_text`` to it and collect its output.

    stderr is merged into stdout. If ``token`` is cancelled before the
    process exits, the process is killed and ``None`` is returned. If the
    calling task itself is cancelled, the process is killed and reaped
    before ``CancelledError`` propagates.

    Args:
        cmd: Command and arguments to run.
        input_text: Text written to the process's stdin.
        cwd: Working directory for the command.
        token: Optional cancellation token.

    Returns:
        Combined output, or None if the run was cancelled.

    Raises:
        OSError: If the executable cannot be started.
    """
    LOGGER.debug(f"Running: {' '.join(cmd)}")
    proc = await asyncio.create_subprocess_exec(
        *cmd,
        stdin=asyncio.subprocess.PIPE,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.STDOUT,
        cwd=str(cwd) if cwd is not None else None,
    )

    communicate = asyncio.ensure_future(proc.communicate(input_text.encode("utf-8")))
    waiters = {communicate}
    cancelled = None
    if token is not None:
        cancelled = asyncio.ensure_future(token.wait())
        waiters.add(cancelled)

    try:
        done, _ = await asyncio.wait(waiters, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        LOGGER.debug(f"Task cancelled, killing {cmd[0]}")
        await asyncio.shield(_terminate(proc, communicate))
        raise
    finally:
        if cancelled is not None:
            cancelled.cancel()

    if communicate in done:
        stdout, _ = communicate.result()
        return stdout.decode("utf-8", errors="replace")

    LOGGER.debug(f"Cancelled: {cmd[0]}")
    await _terminate(proc, communicate)
    return None
