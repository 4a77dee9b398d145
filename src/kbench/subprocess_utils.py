# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution for host probes."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional. Commands are fixed probe
# invocations (ps, kubectl, kubelet, oc) executed without ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from subprocess import CompletedProcess as _CompletedProcess  # nosec B404


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str | None) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    check: bool = True,
    timeout: float | None = None,
) -> _CompletedProcess[str]:
    """Execute *args* after normalising the executable path.

    Args:
        args: Command and arguments; the executable is looked up on ``PATH``
            unless absolute.
        check: Raise :class:`SubprocessExecutionError` on a non-zero exit.
        timeout: Optional timeout in seconds.

    Returns:
        CompletedProcess[str]: Completed process with captured text output.

    Raises:
        FileNotFoundError: If the executable cannot be found.
        SubprocessExecutionError: If ``check`` is set and the command fails.
    """

    normalized = _normalize_args(args)
    try:
        completed: _CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            check=False,
            capture_output=True,
            text=True,
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as exc:
        stdout = exc.stdout.decode(errors="ignore") if isinstance(exc.stdout, bytes) else exc.stdout or ""
        completed = subprocess.CompletedProcess(
            args=normalized,
            returncode=124,
            stdout=stdout,
            stderr=f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out",
        )

    if check and completed.returncode != 0:
        raise SubprocessExecutionError(normalized, completed.returncode, completed.stderr)
    return completed


def capture_output(args: Sequence[str], *, timeout: float | None = 30.0) -> str:
    """Return the combined stdout and stderr of ``args`` regardless of exit status.

    Args:
        args: Command and arguments.
        timeout: Timeout in seconds.

    Returns:
        str: Captured stdout followed by stderr.

    Raises:
        FileNotFoundError: If the executable cannot be found.
    """

    completed = run_command(args, check=False, timeout=timeout)
    return f"{completed.stdout or ''}{completed.stderr or ''}"


__all__ = ["SubprocessExecutionError", "capture_output", "run_command"]
