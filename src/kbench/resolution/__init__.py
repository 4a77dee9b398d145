# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolution of declared components to host artifacts."""

from __future__ import annotations

from .artifacts import ResolvedArtifacts, resolve_artifacts
from .binaries import BinaryResolver
from .files import FileResolver, ResolutionSource, ResolvedPath, StatFunc

__all__ = [
    "BinaryResolver",
    "FileResolver",
    "ResolutionSource",
    "ResolvedArtifacts",
    "ResolvedPath",
    "StatFunc",
    "resolve_artifacts",
]
