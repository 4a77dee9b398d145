# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve every artifact kind for a node in a single pass."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from ..config.models import BINARY_SUBSTITUTION_SUFFIX, BenchConfig, FileCategory
from .binaries import BinaryResolver
from .files import FileResolver, ResolvedPath


@dataclass(frozen=True, slots=True)
class ResolvedArtifacts:
    """Binaries and file paths resolved for the components of one node."""

    binaries: Mapping[str, str] = field(default_factory=dict)
    files: Mapping[FileCategory, Mapping[str, ResolvedPath]] = field(default_factory=dict)

    def paths(self, category: FileCategory) -> dict[str, str]:
        """Return plain resolved values for ``category``."""

        return {name: item.value for name, item in self.files.get(category, {}).items()}

    def substitution_tables(self) -> Iterator[tuple[str, dict[str, str]]]:
        """Yield ``(placeholder suffix, substitutions)`` pairs, binaries first."""

        yield BINARY_SUBSTITUTION_SUFFIX, dict(self.binaries)
        for category in FileCategory:
            yield category.substitution_suffix, self.paths(category)


def resolve_artifacts(
    config: BenchConfig,
    *,
    binary_resolver: BinaryResolver | None = None,
    file_resolver: FileResolver | None = None,
) -> ResolvedArtifacts:
    """Resolve binaries and every file category for ``config``.

    Raises:
        ComponentNotRunningError: If a mandatory component is not running.
        FileProbeError: If a candidate path cannot be checked.
    """

    binary_resolver = binary_resolver or BinaryResolver()
    file_resolver = file_resolver or FileResolver()
    return ResolvedArtifacts(
        binaries=binary_resolver.get_binaries(config),
        files={category: file_resolver.resolve(config, category) for category in FileCategory},
    )


__all__ = ["ResolvedArtifacts", "resolve_artifacts"]
