# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extract platform and Kubernetes version information from tool output."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import MalformedVersionError, UnsupportedVersionError
from .constants import DEFAULT_KUBE_VERSION, OPENSHIFT_PLATFORM, PLATFORM_MARKERS
from .versions import get_ocp_valid_version

_BUILD_STRING_PATTERN = re.compile(r"v?(?P<major>\d+)\.(?P<minor>\d+)\.\d+(?P<suffix>[-+]\S*)")
_KUBELET_VERSION_PATTERN = re.compile(r"Kubernetes v(?P<major>\d+)\.(?P<minor>\d+)(?P<rest>\S*)")
_OPENSHIFT_VERSION_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(r"oc v(\d+\.\d+)"),
    re.compile(r"Server Version:\s*v?(\d+\.\d+)"),
    re.compile(r"Client Version:\s*v?(\d+\.\d+)"),
)
_UNREACHABLE_SERVER_MARKER: Final[str] = "The connection to the server"

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Platform:
    """Managed Kubernetes platform detected from a version string.

    Both fields are empty when no platform was detected.
    """

    name: str = ""
    version: str = ""

    @property
    def detected(self) -> bool:
        """Return ``True`` when a platform name is known."""

        return bool(self.name)


@dataclass(frozen=True, slots=True)
class KubeVersion:
    """Kubernetes version reported by ``kubectl`` or ``kubelet``."""

    major: str = ""
    minor: str = ""
    git_version: str = ""
    default_base: str = DEFAULT_KUBE_VERSION

    @property
    def base_version(self) -> str:
        """Return ``major.minor``, or the default base version when unknown.

        Some providers report minor versions such as ``"15+"``; the ``+`` is
        dropped.
        """

        if not self.major:
            return self.default_base
        return f"{self.major}.{self.minor.replace('+', '')}"


class _ServerVersion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    major: str
    minor: str
    git_version: str = Field(default="", alias="gitVersion")


class _KubectlVersionPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    server_version: _ServerVersion = Field(alias="serverVersion")


def get_platform_info_from_version(version: str) -> Platform:
    """Return the platform encoded in a Kubernetes build string.

    Args:
        version: Build string such as ``"v1.17.9-eks-4c6976"``.

    Returns:
        Platform: Detected platform, or ``Platform()`` for unknown or empty
        input.
    """

    match = _BUILD_STRING_PATTERN.search(version)
    if match is None:
        return Platform()
    suffix = match.group("suffix")
    for marker, name in PLATFORM_MARKERS:
        if suffix.startswith(marker):
            return Platform(name=name, version=f"{int(match.group('major'))}.{int(match.group('minor'))}")
    LOGGER.debug("no platform marker recognised in %r", version)
    return Platform()


def get_version_from_kubectl_output(text: str, *, default: str = DEFAULT_KUBE_VERSION) -> KubeVersion:
    """Parse ``kubectl version -o json`` output.

    Args:
        text: Raw command output.
        default: Base version used when the output cannot be parsed.

    Returns:
        KubeVersion: Reported server version, or one carrying ``default``.
    """

    try:
        payload = _KubectlVersionPayload.model_validate_json(text)
    except ValidationError as exc:
        LOGGER.debug("unable to parse kubectl output: %s", exc)
        if _UNREACHABLE_SERVER_MARKER in text:
            LOGGER.warning(
                "Kubernetes version was not auto-detected because kubectl could not connect "
                "to the Kubernetes server; using default version %s",
                default,
            )
        return KubeVersion(default_base=default)
    server = payload.server_version
    return KubeVersion(
        major=server.major,
        minor=server.minor,
        git_version=server.git_version,
        default_base=default,
    )


def get_version_from_kubelet_output(text: str, *, default: str = DEFAULT_KUBE_VERSION) -> KubeVersion:
    """Parse ``kubelet --version`` output such as ``"Kubernetes v1.18.3"``."""

    match = _KUBELET_VERSION_PATTERN.search(text)
    if match is None:
        LOGGER.debug("unable to parse kubelet output %r", text)
        return KubeVersion(default_base=default)
    major, minor = match.group("major"), match.group("minor")
    return KubeVersion(
        major=major,
        minor=minor,
        git_version=f"v{major}.{minor}{match.group('rest')}",
        default_base=default,
    )


def get_openshift_info_from_output(text: str) -> Platform:
    """Return the OpenShift platform described by ``oc version`` output.

    Args:
        text: Raw ``oc version`` output.

    Returns:
        Platform: ``ocp`` with a supported release bucket, or ``Platform()``
        when the output carries no supported OpenShift version.
    """

    for pattern in _OPENSHIFT_VERSION_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue
        try:
            bucket = get_ocp_valid_version(match.group(1))
        except (MalformedVersionError, UnsupportedVersionError) as exc:
            LOGGER.debug("ignoring openshift version: %s", exc)
            return Platform()
        return Platform(name=OPENSHIFT_PLATFORM, version=bucket)
    return Platform()


__all__ = [
    "KubeVersion",
    "Platform",
    "get_openshift_info_from_output",
    "get_platform_info_from_version",
    "get_version_from_kubectl_output",
    "get_version_from_kubelet_output",
]
