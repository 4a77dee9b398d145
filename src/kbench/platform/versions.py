# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Walk ``major.minor`` versions backwards to find the nearest supported release."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from ..errors import MalformedVersionError, UnsupportedVersionError
from .constants import DEFAULT_KUBE_VERSION, SUPPORTED_OCP_VERSIONS

_BASE_VERSION_PATTERN = re.compile(r"^v?(?P<major>\d+)\.(?P<minor>\d+)")

LOGGER = logging.getLogger(__name__)


def decrement_version(version: str) -> str:
    """Return ``version`` with its minor component decremented.

    Components after the minor one are preserved. A minor version of ``1`` or
    lower cannot be decremented and yields an empty string, which tells
    callers to stop searching.

    Args:
        version: Version string of the form ``major.minor[.rest]``.

    Returns:
        str: Decremented version, or ``""`` when the floor is reached.

    Raises:
        MalformedVersionError: If ``version`` has no numeric minor component.
    """

    parts = version.split(".")
    if len(parts) < 2 or not parts[0].isdigit() or not parts[1].isdigit():
        raise MalformedVersionError(f"unable to parse version {version!r}")
    minor = int(parts[1])
    if minor <= 1:
        return ""
    parts[1] = str(minor - 1)
    return ".".join(parts)


def base_version(version: str) -> str:
    """Return the ``major.minor`` prefix of ``version``.

    Raises:
        MalformedVersionError: If no ``major.minor`` prefix is present.
    """

    match = _BASE_VERSION_PATTERN.match(version.strip())
    if match is None:
        raise MalformedVersionError(f"unable to parse version {version!r}")
    return f"{int(match.group('major'))}.{int(match.group('minor'))}"


def get_ocp_valid_version(version: str) -> str:
    """Bucket an OpenShift version into the nearest supported release.

    ``3.x`` releases from ``3.10`` map to ``3.10`` and ``4.x`` releases from
    ``4.1`` map to ``4.1``.

    Args:
        version: OpenShift version, for example ``"4.6"`` or ``"3.11.0"``.

    Returns:
        str: Supported release bucket.

    Raises:
        MalformedVersionError: If ``version`` cannot be parsed.
        UnsupportedVersionError: If no supported release precedes ``version``.
    """

    candidate = base_version(version)
    while candidate:
        if candidate in SUPPORTED_OCP_VERSIONS:
            LOGGER.debug("openshift version %s uses bucket %s", version, candidate)
            return candidate
        candidate = decrement_version(candidate)
    raise UnsupportedVersionError(f"unable to find a matching benchmark version for ocp version: {version}")


def map_to_benchmark_version(
    version_mapping: Mapping[str, str],
    kube_version: str,
    *,
    default_kube_version: str = DEFAULT_KUBE_VERSION,
) -> str:
    """Return the benchmark profile mapped to ``kube_version`` or the nearest older release.

    The search stops after checking ``default_kube_version`` or once the minor
    version cannot be decremented further.

    Args:
        version_mapping: Kubernetes ``major.minor`` to benchmark profile table.
        kube_version: Kubernetes version to look up.
        default_kube_version: Version at which the backward walk stops.

    Returns:
        str: Matching benchmark profile.

    Raises:
        MalformedVersionError: If ``kube_version`` cannot be parsed.
        UnsupportedVersionError: If no mapping entry matches.
    """

    candidate = kube_version
    while candidate:
        profile = version_mapping.get(candidate)
        if profile is not None:
            LOGGER.debug("kubernetes version %s maps to benchmark %s via %s", kube_version, profile, candidate)
            return profile
        if candidate == default_kube_version:
            break
        candidate = decrement_version(candidate)
    raise UnsupportedVersionError(
        f"unable to find a matching benchmark version for kubernetes version: {kube_version}",
    )


__all__ = ["base_version", "decrement_version", "get_ocp_valid_version", "map_to_benchmark_version"]
