# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

import pytest

from kbench.config import BenchConfig
from kbench.process import ProcessMatcher


@dataclass
class StatScript:
    """Replay scripted ``stat`` outcomes; ``None`` means the path exists."""

    outcomes: list[OSError | None]
    calls: list[str] = field(default_factory=list)

    def __call__(self, path: str) -> None:
        self.calls.append(path)
        outcome = self.outcomes[len(self.calls) - 1]
        if outcome is not None:
            raise outcome


@pytest.fixture
def stat_script() -> Callable[..., StatScript]:
    """Return a factory building :class:`StatScript` instances."""

    return lambda *outcomes: StatScript(list(outcomes))


@pytest.fixture
def matcher_for() -> Callable[[str], ProcessMatcher]:
    """Return a factory for matchers whose process snapshot is fixed text."""

    return lambda snapshot: ProcessMatcher(lambda _name: snapshot)


@pytest.fixture
def bench_config() -> Callable[[Mapping[str, object]], BenchConfig]:
    """Return a factory building :class:`BenchConfig` from raw sections."""

    return lambda section: BenchConfig.from_section(section)
