# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Declarative tables mapping version strings to platforms and benchmark profiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_KUBE_VERSION: Final[str] = "1.18"
OPENSHIFT_PLATFORM: Final[str] = "ocp"
SUPPORTED_OCP_VERSIONS: Final[frozenset[str]] = frozenset({"3.10", "4.1"})

# Ordered (suffix marker, platform name) pairs. The marker must immediately
# follow the ``major.minor.patch`` triple of a build string.
PLATFORM_MARKERS: Final[tuple[tuple[str, str], ...]] = (
    ("-eks-", "eks"),
    ("-gke.", "gke"),
    ("-aliyun.", "aliyun"),
    ("+k3s", "k3s"),
    ("-rancher1", "rancher1"),
    ("+rke2r", "rke2r"),
    ("+aks", "aks"),
)


@dataclass(frozen=True, slots=True)
class ProfileRule:
    """Map a platform, optionally restricted to an inclusive version range, to a profile."""

    platforms: frozenset[str]
    profile: str
    min_version: str | None = None
    max_version: str | None = None


def _pinned(platforms: frozenset[str], profile: str, version: str) -> ProfileRule:
    return ProfileRule(platforms, profile, version, version)


_EKS: Final = frozenset({"eks"})
_GKE: Final = frozenset({"gke"})
_K3S: Final = frozenset({"k3s"})
_RANCHER: Final = frozenset({"rancher", "rancher1"})
_RKE2: Final = frozenset({"rke2r"})

# First matching rule wins.
PROFILE_RULES: Final[tuple[ProfileRule, ...]] = (
    ProfileRule(_EKS, "eks-1.2.0"),
    ProfileRule(_GKE, "gke-1.0", "1.15", "1.19"),
    ProfileRule(_GKE, "gke-1.2.0"),
    ProfileRule(frozenset({"aliyun"}), "ack-1.0"),
    _pinned(frozenset({OPENSHIFT_PLATFORM}), "rh-0.7", "3.10"),
    _pinned(frozenset({OPENSHIFT_PLATFORM}), "rh-1.0", "4.1"),
    ProfileRule(frozenset({"vmware"}), "tkgi-1.2.53"),
    _pinned(_K3S, "k3s-cis-1.23", "1.23"),
    _pinned(_K3S, "k3s-cis-1.24", "1.24"),
    ProfileRule(_K3S, "k3s-cis-1.7"),
    _pinned(_RANCHER, "rke-cis-1.23", "1.23"),
    _pinned(_RANCHER, "rke-cis-1.24", "1.24"),
    ProfileRule(_RANCHER, "rke-cis-1.7"),
    _pinned(_RKE2, "rke2-cis-1.23", "1.23"),
    _pinned(_RKE2, "rke2-cis-1.24", "1.24"),
    ProfileRule(_RKE2, "rke2-cis-1.7"),
    ProfileRule(frozenset({"aks"}), "aks-1.7"),
)

__all__ = [
    "DEFAULT_KUBE_VERSION",
    "OPENSHIFT_PLATFORM",
    "PLATFORM_MARKERS",
    "PROFILE_RULES",
    "ProfileRule",
    "SUPPORTED_OCP_VERSIONS",
]
