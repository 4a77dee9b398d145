# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Detect running executables from process-table snapshots."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from typing import Final, TypeAlias

from .errors import ExecutableNotFoundError
from .subprocess_utils import run_command

ProcessLister: TypeAlias = Callable[[str], str]
"""Return process-table text for processes named like the argument."""

PS_COMMAND: Final[tuple[str, ...]] = ("ps", "-o", "cmd", "--no-headers", "-C")
_QUOTES: Final[str] = "'\""

LOGGER = logging.getLogger(__name__)


def ps_snapshot(process_name: str) -> str:
    """Return the command lines of processes named ``process_name``.

    ``ps`` exits non-zero when nothing matches; that case and a missing
    ``ps`` binary both produce an empty snapshot.

    Args:
        process_name: Executable name passed to ``ps -C``.

    Returns:
        str: One command line per matching process.
    """

    try:
        completed = run_command([*PS_COMMAND, process_name], check=False)
    except FileNotFoundError as exc:
        LOGGER.debug("unable to list processes: %s", exc)
        return ""
    return completed.stdout or ""


def _binary_pattern(words: Sequence[str]) -> re.Pattern[str]:
    # The first word starts a column, optionally after a path whose prefix
    # holds no ``=`` (so ``--flag=/dir/name`` arguments never match). The
    # last word may not run into a file extension or a hyphenated name.
    body = r"\s+".join(re.escape(word) for word in words)
    return re.compile(rf"(?:^|\s)(?:[^\s=]*/)?{body}(?![.\-])")


class ProcessMatcher:
    """Decide whether executables are running using an injected process lister."""

    def __init__(self, lister: ProcessLister = ps_snapshot) -> None:
        """Create a matcher backed by ``lister``.

        Args:
            lister: Callable returning process-table text for a process name.
        """

        self._lister = lister

    def verify_bin(self, process_name: str) -> bool:
        """Return ``True`` when ``process_name`` starts a column of a snapshot line.

        ``process_name`` may contain several words, for example
        ``"hyperkube apiserver"``. ``cmd`` matches ``/usr/bin/cmd --flag`` but
        not ``kube-cmd`` or ``/usr/bin/kube-cmd``.

        Args:
            process_name: Executable name, optionally followed by arguments.

        Returns:
            bool: Whether any snapshot line matches.
        """

        words = process_name.strip(_QUOTES).split()
        if not words:
            return False
        snapshot = self._lister(words[0])
        pattern = _binary_pattern(words)
        for line in snapshot.splitlines():
            if pattern.search(line):
                LOGGER.debug("process line %r matches %r", line, process_name)
                return True
        return False

    def find_executable(self, candidates: Sequence[str]) -> str:
        """Return the first running candidate.

        Args:
            candidates: Ordered executable names.

        Returns:
            str: First candidate for which :meth:`verify_bin` succeeds.

        Raises:
            ExecutableNotFoundError: If no candidate is running.
        """

        for candidate in candidates:
            if self.verify_bin(candidate):
                return candidate
            LOGGER.debug("executable %r not running", candidate)
        raise ExecutableNotFoundError(candidates)


__all__ = ["PS_COMMAND", "ProcessLister", "ProcessMatcher", "ps_snapshot"]
