# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve configuration, service, kubeconfig and data-directory paths."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from ..config.models import BenchConfig, FileCategory
from ..errors import FileProbeError

StatFunc: TypeAlias = Callable[[str], object]
"""Return when the path exists; raise :class:`OSError` otherwise."""

LOGGER = logging.getLogger(__name__)


class ResolutionSource(str, Enum):
    """Describe which fallback tier produced a resolved value."""

    CANDIDATE = "candidate"
    DEFAULT = "default"
    COMPONENT = "component"


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """Resolved path for a component together with its provenance."""

    component: str
    value: str
    source: ResolutionSource

    @property
    def found(self) -> bool:
        """Return ``True`` when the value is an existing candidate."""

        return self.source is ResolutionSource.CANDIDATE


class FileResolver:
    """Select the first existing candidate path for each component."""

    def __init__(self, stat: StatFunc = os.stat) -> None:
        """Create a resolver using ``stat`` as the existence primitive.

        Args:
            stat: Callable that returns for existing paths and raises
                :class:`OSError` otherwise.
        """

        self._stat = stat

    def find_config_file(self, candidates: Sequence[str]) -> str | None:
        """Return the first candidate that exists.

        Args:
            candidates: Ordered candidate paths.

        Returns:
            str | None: Existing candidate, or ``None`` when none exist.

        Raises:
            FileProbeError: If checking a candidate fails for a reason other
                than the path being absent.
        """

        for candidate in candidates:
            try:
                self._stat(candidate)
            except (FileNotFoundError, NotADirectoryError):
                continue
            except OSError as exc:
                raise FileProbeError(candidate, exc) from exc
            return candidate
        return None

    def resolve(
        self,
        config: BenchConfig,
        category: FileCategory,
        components: Sequence[str] | None = None,
    ) -> dict[str, ResolvedPath]:
        """Resolve ``category`` paths for every configured component.

        Each component falls back from its candidates to the category default
        and finally to the component name itself.

        Args:
            config: Node configuration holding component definitions.
            category: File category to resolve.
            components: Component names to resolve; defaults to the names
                declared by ``config``.

        Returns:
            dict[str, ResolvedPath]: Resolutions keyed by component name.
        """

        names = config.components if components is None else tuple(components)
        resolved: dict[str, ResolvedPath] = {}
        for name in names:
            component = config.component(name)
            if component is None:
                continue
            found = self.find_config_file(component.candidates(category))
            if found is not None:
                LOGGER.debug("component %s uses %s file %r", name, category.value, found)
                resolved[name] = ResolvedPath(name, found, ResolutionSource.CANDIDATE)
                continue
            default = component.default(category)
            if default is not None:
                LOGGER.debug("using default %s file %r for component %s", category.value, default, name)
                resolved[name] = ResolvedPath(name, default, ResolutionSource.DEFAULT)
            else:
                LOGGER.debug("missing %s file for %s", category.value, name)
                resolved[name] = ResolvedPath(name, name, ResolutionSource.COMPONENT)
        return resolved

    def get_files(
        self,
        config: BenchConfig,
        category: FileCategory,
        components: Sequence[str] | None = None,
    ) -> dict[str, str]:
        """Return resolved ``category`` paths keyed by component name."""

        return {name: item.value for name, item in self.resolve(config, category, components).items()}


__all__ = ["FileResolver", "ResolutionSource", "ResolvedPath", "StatFunc"]
