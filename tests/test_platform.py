# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for platform and Kubernetes version detection."""

from __future__ import annotations

from kbench.platform import (
    DEFAULT_KUBE_VERSION,
    KubeVersion,
    Platform,
    get_openshift_info_from_output,
    get_platform_info_from_version,
    get_version_from_kubectl_output,
    get_version_from_kubelet_output,
)


def test_platform_detected_from_managed_build_strings() -> None:
    assert get_platform_info_from_version("v1.17.9-eks-4c6976") == Platform("eks", "1.17")
    assert get_platform_info_from_version("v1.17.6-gke.1") == Platform("gke", "1.17")
    assert get_platform_info_from_version("v1.18.8-aliyun.1") == Platform("aliyun", "1.18")
    assert get_platform_info_from_version("v1.27.6+aks1") == Platform("aks", "1.27")


def test_platform_detected_from_distribution_build_strings() -> None:
    assert get_platform_info_from_version("v1.27.6+k3s1") == Platform("k3s", "1.27")
    assert get_platform_info_from_version("v1.25.13-rancher1-1") == Platform("rancher1", "1.25")
    assert get_platform_info_from_version("v1.27.6+rke2r1") == Platform("rke2r", "1.27")


def test_platform_undetected_for_plain_or_unknown_versions() -> None:
    assert get_platform_info_from_version("v1.17.6") == Platform()
    assert get_platform_info_from_version("") == Platform()
    assert get_platform_info_from_version("v1.17.6-custom.1") == Platform()
    assert get_platform_info_from_version("not a version") == Platform()
    assert not Platform().detected


def test_platform_version_is_never_patch_qualified() -> None:
    platform = get_platform_info_from_version("Server Version: v1.21.14-gke.2100")

    assert platform == Platform("gke", "1.21")
    assert platform.detected


def test_kubectl_output_is_parsed() -> None:
    version = get_version_from_kubectl_output(
        """{
  "serverVersion": {
    "major": "1",
    "minor": "8",
    "gitVersion": "v1.8.0"
  }
}""",
    )

    assert version.base_version == "1.8"
    assert version.git_version == "v1.8.0"


def test_kubectl_output_strips_plus_from_minor() -> None:
    text = '{"serverVersion": {"major": "1", "minor": "15+", "gitVersion": "v1.15.11-eks-af3caf"}}'

    version = get_version_from_kubectl_output(text)

    assert version.base_version == "1.15"
    assert get_platform_info_from_version(version.git_version) == Platform("eks", "1.15")


def test_kubectl_output_falls_back_to_default() -> None:
    assert get_version_from_kubectl_output("Something completely different").base_version == DEFAULT_KUBE_VERSION
    assert get_version_from_kubectl_output('{"clientVersion": {}}').base_version == DEFAULT_KUBE_VERSION
    assert get_version_from_kubectl_output("nope", default="1.20").base_version == "1.20"


def test_kubelet_output_is_parsed() -> None:
    version = get_version_from_kubelet_output("Kubernetes v1.18.3+k3s1\n")

    assert version == KubeVersion(major="1", minor="18", git_version="v1.18.3+k3s1")
    assert version.base_version == "1.18"
    assert get_version_from_kubelet_output("garbage", default="1.21").base_version == "1.21"


def test_openshift_output_is_bucketed() -> None:
    assert get_openshift_info_from_output("oc v3.11.0+0cbc58b\nkubernetes v1.11.0") == Platform("ocp", "3.10")
    assert get_openshift_info_from_output("Client Version: 4.5.0\nServer Version: 4.6.1\n") == Platform("ocp", "4.1")
    assert get_openshift_info_from_output("Client Version: v4.7.0") == Platform("ocp", "4.1")


def test_openshift_output_without_supported_version() -> None:
    assert get_openshift_info_from_output("oc v2.9.0") == Platform()
    assert get_openshift_info_from_output("command not found") == Platform()
