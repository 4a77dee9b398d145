# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Query the host for its Kubernetes version and platform."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Final, TypeAlias

from .errors import KubeVersionUnavailableError
from .platform.constants import DEFAULT_KUBE_VERSION
from .platform.detector import (
    KubeVersion,
    Platform,
    get_openshift_info_from_output,
    get_platform_info_from_version,
    get_version_from_kubectl_output,
    get_version_from_kubelet_output,
)
from .subprocess_utils import SubprocessExecutionError, capture_output, run_command

CommandRunner: TypeAlias = Callable[[Sequence[str]], str]
"""Return the output of a command; raise ``FileNotFoundError`` when it is missing."""

KUBECTL_VERSION_COMMAND: Final[tuple[str, ...]] = ("kubectl", "version", "-o", "json")
KUBELET_VERSION_COMMAND: Final[tuple[str, ...]] = ("kubelet", "--version")
OC_VERSION_COMMAND: Final[tuple[str, ...]] = ("oc", "version")

LOGGER = logging.getLogger(__name__)


def checked_output(args: Sequence[str]) -> str:
    """Return stdout of ``args``, raising when the command fails."""

    return run_command(args).stdout or ""


class HostProbe:
    """Detect the Kubernetes version and platform by running CLI tools."""

    def __init__(
        self,
        runner: CommandRunner = capture_output,
        *,
        openshift_runner: CommandRunner = checked_output,
        default_kube_version: str = DEFAULT_KUBE_VERSION,
    ) -> None:
        """Create a probe.

        Args:
            runner: Runs ``kubectl``/``kubelet`` and returns their output.
            openshift_runner: Runs ``oc version``; failures mean "not
                OpenShift".
            default_kube_version: Base version used when output is unparseable.
        """

        self._runner = runner
        self._openshift_runner = openshift_runner
        self._default = default_kube_version

    def kube_version(self) -> KubeVersion:
        """Return the running Kubernetes version.

        ``kubectl`` is preferred; ``kubelet`` is used when ``kubectl`` is not
        installed.

        Raises:
            KubeVersionUnavailableError: If neither tool is installed.
        """

        try:
            output = self._runner(KUBECTL_VERSION_COMMAND)
        except FileNotFoundError:
            LOGGER.debug("kubectl not found, trying kubelet")
        else:
            return get_version_from_kubectl_output(output, default=self._default)
        try:
            output = self._runner(KUBELET_VERSION_COMMAND)
        except FileNotFoundError as exc:
            raise KubeVersionUnavailableError("need kubectl or kubelet binaries to get kubernetes version") from exc
        return get_version_from_kubelet_output(output, default=self._default)

    def openshift(self) -> Platform:
        """Return the OpenShift platform, or ``Platform()`` when ``oc`` is unavailable."""

        try:
            output = self._openshift_runner(OC_VERSION_COMMAND)
        except (FileNotFoundError, SubprocessExecutionError) as exc:
            LOGGER.debug("openshift not detected: %s", exc)
            return Platform()
        return get_openshift_info_from_output(output)

    def platform(self) -> Platform:
        """Return the detected platform, preferring OpenShift detection."""

        openshift = self.openshift()
        if openshift.name and openshift.version:
            return openshift
        try:
            version = self.kube_version()
        except KubeVersionUnavailableError as exc:
            LOGGER.debug("platform not detected: %s", exc)
            return Platform()
        return get_platform_info_from_version(version.git_version)


__all__ = [
    "CommandRunner",
    "HostProbe",
    "KUBECTL_VERSION_COMMAND",
    "KUBELET_VERSION_COMMAND",
    "OC_VERSION_COMMAND",
    "checked_output",
]
