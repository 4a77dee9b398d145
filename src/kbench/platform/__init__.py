# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Platform detection and benchmark profile selection."""

from __future__ import annotations

from .benchmark import get_benchmark_version, get_platform_benchmark_version
from .constants import DEFAULT_KUBE_VERSION, PLATFORM_MARKERS, PROFILE_RULES
from .detector import (
    KubeVersion,
    Platform,
    get_openshift_info_from_output,
    get_platform_info_from_version,
    get_version_from_kubectl_output,
    get_version_from_kubelet_output,
)
from .versions import decrement_version, get_ocp_valid_version, map_to_benchmark_version

__all__ = [
    "DEFAULT_KUBE_VERSION",
    "KubeVersion",
    "PLATFORM_MARKERS",
    "PROFILE_RULES",
    "Platform",
    "decrement_version",
    "get_benchmark_version",
    "get_ocp_valid_version",
    "get_openshift_info_from_output",
    "get_platform_benchmark_version",
    "get_platform_info_from_version",
    "get_version_from_kubectl_output",
    "get_version_from_kubelet_output",
    "map_to_benchmark_version",
]
