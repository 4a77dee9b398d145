# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Select the benchmark profile that applies to a platform or Kubernetes version."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from packaging.version import InvalidVersion, Version

from ..errors import KubeVersionUnavailableError, MalformedVersionError, UnsupportedVersionError, VersionConflictError
from .constants import DEFAULT_KUBE_VERSION, OPENSHIFT_PLATFORM, PROFILE_RULES, ProfileRule
from .detector import KubeVersion, Platform
from .versions import get_ocp_valid_version, map_to_benchmark_version

LOGGER = logging.getLogger(__name__)


def _version_in_range(version: str, lower: str | None, upper: str | None) -> bool:
    if lower is None and upper is None:
        return True
    try:
        current = Version(version)
    except InvalidVersion:
        return False
    if lower is not None and current < Version(lower):
        return False
    return upper is None or current <= Version(upper)


def _rule_matches(rule: ProfileRule, platform: Platform) -> bool:
    return platform.name in rule.platforms and _version_in_range(
        platform.version,
        rule.min_version,
        rule.max_version,
    )


def get_platform_benchmark_version(platform: Platform) -> str:
    """Return the benchmark profile for ``platform``.

    OpenShift versions are first bucketed with
    :func:`~kbench.platform.versions.get_ocp_valid_version`.

    Args:
        platform: Detected platform.

    Returns:
        str: Benchmark profile id, or ``""`` when the platform is unknown.
    """

    if not platform.name:
        return ""
    if platform.name == OPENSHIFT_PLATFORM:
        try:
            platform = Platform(platform.name, get_ocp_valid_version(platform.version))
        except (MalformedVersionError, UnsupportedVersionError) as exc:
            LOGGER.debug("no openshift benchmark: %s", exc)
            return ""
    for rule in PROFILE_RULES:
        if _rule_matches(rule, platform):
            return rule.profile
    return ""


def get_benchmark_version(
    *,
    kube_version: str = "",
    benchmark_version: str = "",
    platform: Platform | None = None,
    version_mapping: Mapping[str, str] | None = None,
    kube_version_provider: Callable[[], KubeVersion] | None = None,
    default_kube_version: str = DEFAULT_KUBE_VERSION,
) -> str:
    """Decide which benchmark profile to run.

    An explicit ``benchmark_version`` wins. Without one, a detected
    ``platform`` selects its profile, and otherwise the Kubernetes version
    (given or obtained from ``kube_version_provider``) is mapped through
    ``version_mapping``.

    Args:
        kube_version: Kubernetes ``major.minor`` forced by the caller.
        benchmark_version: Benchmark profile forced by the caller.
        platform: Detected platform, if any.
        version_mapping: Kubernetes version to benchmark profile table.
        kube_version_provider: Callable reporting the running Kubernetes
            version when ``kube_version`` is empty.
        default_kube_version: Version at which the mapping walk stops.

    Returns:
        str: Selected benchmark profile.

    Raises:
        VersionConflictError: If both ``kube_version`` and
            ``benchmark_version`` are given.
        KubeVersionUnavailableError: If a Kubernetes version is needed but
            no provider is available.
        UnsupportedVersionError: If the version mapping has no match.
    """

    if kube_version and benchmark_version:
        raise VersionConflictError("it is an error to specify both a kubernetes version and a benchmark version")
    if not benchmark_version and not kube_version and platform is not None and platform.name:
        benchmark_version = get_platform_benchmark_version(platform)
    if benchmark_version:
        return benchmark_version
    if not kube_version:
        if kube_version_provider is None:
            raise KubeVersionUnavailableError("kubernetes version is unknown and cannot be detected")
        kube_version = kube_version_provider().base_version
    return map_to_benchmark_version(
        version_mapping or {},
        kube_version,
        default_kube_version=default_kube_version,
    )


__all__ = ["get_benchmark_version", "get_platform_benchmark_version"]
