# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve each declared component to the binary currently running for it."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..config.models import BenchConfig
from ..errors import ComponentNotRunningError, ExecutableNotFoundError
from ..process import ProcessMatcher

LOGGER = logging.getLogger(__name__)


class BinaryResolver:
    """Pick the running binary for every configured component."""

    def __init__(self, matcher: ProcessMatcher | None = None) -> None:
        """Create a resolver using ``matcher`` to inspect running processes.

        Args:
            matcher: Process matcher; defaults to one backed by ``ps``.
        """

        self._matcher = matcher or ProcessMatcher()

    def get_binaries(
        self,
        config: BenchConfig,
        components: Sequence[str] | None = None,
    ) -> dict[str, str]:
        """Return a mapping of component name to running binary.

        Components without a definition or without binary candidates are
        skipped. Optional components that are not running are omitted.

        Args:
            config: Node configuration holding component definitions.
            components: Component names to resolve; defaults to the names
                declared by ``config``.

        Returns:
            dict[str, str]: Resolved binaries keyed by component name.

        Raises:
            ComponentNotRunningError: If a mandatory component is not running.
        """

        names = config.components if components is None else tuple(components)
        binaries: dict[str, str] = {}
        for name in names:
            component = config.component(name)
            if component is None or not component.binary_candidates:
                continue
            try:
                binary = self._matcher.find_executable(component.binary_candidates)
            except ExecutableNotFoundError as exc:
                if component.optional:
                    LOGGER.debug("optional component %s not running", name)
                    continue
                raise ComponentNotRunningError(
                    name,
                    component.binary_candidates,
                    node_type=config.node_type,
                ) from exc
            LOGGER.debug("component %s uses running binary %s", name, binary)
            binaries[name] = binary
        return binaries


__all__ = ["BinaryResolver"]
