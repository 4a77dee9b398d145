# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate benchmark ruleset directories and the rule files they contain."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Final

from .errors import MalformedVersionError, RulesetNotFoundError

DEFAULT_CONFIG_DIR: Final[Path] = Path("cfg")
CONFIG_METADATA_FILENAME: Final[str] = "config.yaml"
RULESET_SUFFIX: Final[str] = ".yaml"

# <family>[-<qualifier>...]-<major>.<minor>[.<patch>], e.g. ``cis-1.4``,
# ``gke-1.2.0`` or ``k3s-cis-1.7``.
_BENCHMARK_VERSION_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]*(?:-[A-Za-z][A-Za-z0-9]*)*-\d+(?:\.\d+)+$")

LOGGER = logging.getLogger(__name__)


def get_config_file_path(
    benchmark_version: str,
    relative_file: str,
    *,
    cfg_dir: Path = DEFAULT_CONFIG_DIR,
) -> Path:
    """Return the ruleset directory for ``benchmark_version``.

    Args:
        benchmark_version: Benchmark profile id naming a directory below
            ``cfg_dir``.
        relative_file: File that must exist inside that directory, for
            example ``"master.yaml"``. A leading separator is ignored.
        cfg_dir: Root directory holding one sub-directory per profile.

    Returns:
        Path: Absolute path of the ruleset directory.

    Raises:
        MalformedVersionError: If ``benchmark_version`` is not shaped like a
            profile id.
        RulesetNotFoundError: If the directory or the file is missing.
    """

    if not _BENCHMARK_VERSION_PATTERN.match(benchmark_version):
        raise MalformedVersionError(f"invalid benchmark version {benchmark_version!r}")
    directory = (cfg_dir / benchmark_version).absolute()
    target = directory / relative_file.lstrip("/\\")
    LOGGER.debug("looking for file %s", target)
    if not target.exists():
        raise RulesetNotFoundError(f"no test files found <= benchmark version: {benchmark_version}")
    return directory


def _raise_walk_error(error: OSError) -> None:
    raise error


def get_yaml_files_from_dir(directory: Path) -> list[Path]:
    """Return the rule-definition files below ``directory``.

    Files are collected recursively in sorted order; ``config.yaml`` holds
    configuration metadata rather than rules and is skipped.

    Args:
        directory: Ruleset directory to scan.

    Returns:
        list[Path]: Absolute paths of the rule files.

    Raises:
        OSError: If the directory cannot be read.
    """

    files: list[Path] = []
    root = Path(directory).absolute()
    for current, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            if name == CONFIG_METADATA_FILENAME or not name.endswith(RULESET_SUFFIX):
                continue
            files.append(Path(current) / name)
    return files


__all__ = [
    "CONFIG_METADATA_FILENAME",
    "DEFAULT_CONFIG_DIR",
    "RULESET_SUFFIX",
    "get_config_file_path",
    "get_yaml_files_from_dir",
]
