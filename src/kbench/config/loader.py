# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load benchmark configuration documents from YAML files."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Final

import yaml

from .models import ConfigError, RunConfig

CONFIG_ENCODING: Final[str] = "utf-8"

LOGGER = logging.getLogger(__name__)


def load_config(path: Path) -> RunConfig:
    """Read and validate the configuration stored at ``path``.

    Args:
        path: YAML document describing node types and version mapping.

    Returns:
        RunConfig: Validated configuration.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """

    try:
        raw = path.read_text(encoding=CONFIG_ENCODING)
    except OSError as exc:
        raise ConfigError(f"unable to read configuration {path}: {exc}") from exc
    LOGGER.debug("loaded configuration from %s", path)
    return parse_config(raw, source=str(path))


def parse_config(text: str, *, source: str = "<string>") -> RunConfig:
    """Parse a YAML configuration document.

    Args:
        text: YAML text.
        source: Label used in error messages.

    Returns:
        RunConfig: Validated configuration.

    Raises:
        ConfigError: If the document is not valid YAML or has the wrong shape.
    """

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{source}: invalid YAML: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"{source}: top-level document must be a mapping")
    return RunConfig.from_mapping(data)


__all__ = ["load_config", "parse_config"]
