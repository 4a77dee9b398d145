# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .loader import load_config, parse_config
from .models import (
    BINARY_SUBSTITUTION_SUFFIX,
    DEFAULT_NODE_TYPE,
    NODE_TYPES,
    BenchConfig,
    Component,
    ConfigError,
    FileCategory,
    RunConfig,
)

__all__ = [
    "BINARY_SUBSTITUTION_SUFFIX",
    "BenchConfig",
    "Component",
    "ConfigError",
    "DEFAULT_NODE_TYPE",
    "FileCategory",
    "NODE_TYPES",
    "RunConfig",
    "load_config",
    "parse_config",
]
