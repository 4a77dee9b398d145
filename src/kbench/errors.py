# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the resolution, platform and ruleset helpers."""

from __future__ import annotations

from collections.abc import Sequence


class KbenchError(Exception):
    """Base class for every error raised by :mod:`kbench`."""


class NotFoundError(KbenchError):
    """Raised when a mandatory artifact cannot be located."""


class ExecutableNotFoundError(NotFoundError):
    """Raised when none of the candidate executables is running."""

    def __init__(self, candidates: Sequence[str]) -> None:
        super().__init__(f"no candidates running: {', '.join(candidates) or '<none>'}")
        self.candidates = tuple(candidates)


class ComponentNotRunningError(NotFoundError):
    """Raised when a mandatory component has no running binary."""

    def __init__(self, component: str, candidates: Sequence[str], *, node_type: str | None = None) -> None:
        location = f" on {node_type} node" if node_type else ""
        super().__init__(
            f"unable to find binary for {component}{location}; "
            f"looked for: {', '.join(candidates) or '<none>'}",
        )
        self.component = component
        self.candidates = tuple(candidates)
        self.node_type = node_type


class RulesetNotFoundError(NotFoundError):
    """Raised when no ruleset directory matches a benchmark version."""


class KubeVersionUnavailableError(NotFoundError):
    """Raised when neither ``kubectl`` nor ``kubelet`` can report a version."""


class UnsupportedVersionError(KbenchError):
    """Raised when a version falls outside every known bucket."""


class MalformedVersionError(KbenchError, ValueError):
    """Raised when a version string cannot be parsed."""


class FileProbeError(KbenchError):
    """Raised when checking a candidate path fails for a reason other than absence."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"error looking for file {path}: {cause}")
        self.path = path
        self.cause = cause


class VersionConflictError(KbenchError):
    """Raised when both a Kubernetes version and a benchmark version are forced."""


class ConfigError(KbenchError):
    """Raised when configuration input is invalid."""


__all__ = [
    "ComponentNotRunningError",
    "ConfigError",
    "ExecutableNotFoundError",
    "FileProbeError",
    "KbenchError",
    "KubeVersionUnavailableError",
    "MalformedVersionError",
    "NotFoundError",
    "RulesetNotFoundError",
    "UnsupportedVersionError",
    "VersionConflictError",
]
