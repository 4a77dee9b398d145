# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration models and the YAML loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from kbench.config import BenchConfig, Component, ConfigError, FileCategory, load_config, parse_config
from kbench.errors import KbenchError

_CONFIG = """
master:
  components:
    - apiserver
    - etcd
  apiserver:
    bins:
      - "kube-apiserver"
      - "hyperkube apiserver"
    confs:
      - /etc/kubernetes/manifests/kube-apiserver.yaml
    defaultconf: /etc/kubernetes/manifests/kube-apiserver.yaml
  etcd:
    optional: true
    bins: etcd
    datadirs:
      - /var/lib/etcd/default.etcd
node:
  components: [kubelet]
  kubelet:
    bins: [kubelet]
    svc: [/etc/systemd/system/kubelet.service.d/10-kubeadm.conf]
    defaultsvc: /etc/systemd/system/kubelet.service
version_mapping:
  "1.18": "cis-1.6"
  "1.15": "cis-1.5"
"""


def test_parse_config_builds_node_sections() -> None:
    run_config = parse_config(_CONFIG)

    master = run_config.node("master")
    assert master.components == ("apiserver", "etcd")
    apiserver = master.component("apiserver")
    assert apiserver is not None
    assert apiserver.binary_candidates == ("kube-apiserver", "hyperkube apiserver")
    assert apiserver.default(FileCategory.CONFIG) == "/etc/kubernetes/manifests/kube-apiserver.yaml"
    assert not apiserver.optional

    etcd = master.component("etcd")
    assert etcd is not None
    assert etcd.optional
    assert etcd.binary_candidates == ("etcd",)
    assert etcd.candidates(FileCategory.DATADIR) == ("/var/lib/etcd/default.etcd",)
    assert etcd.default(FileCategory.DATADIR) is None

    kubelet = run_config.node("node").component("kubelet")
    assert kubelet is not None
    assert kubelet.default(FileCategory.SERVICE) == "/etc/systemd/system/kubelet.service"
    assert run_config.version_mapping == {"1.18": "cis-1.6", "1.15": "cis-1.5"}


def test_missing_node_type_is_a_config_error() -> None:
    run_config = parse_config(_CONFIG)

    with pytest.raises(ConfigError, match="etcd"):
        run_config.node("etcd")


def test_load_config_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(_CONFIG, encoding="utf-8")

    assert load_config(path).node("node").components == ("kubelet",)


def test_load_config_errors(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="unable to read"):
        load_config(tmp_path / "absent.yaml")
    with pytest.raises(ConfigError, match="invalid YAML"):
        parse_config("master: [unterminated")
    with pytest.raises(ConfigError, match="mapping"):
        parse_config("- just\n- a list\n")
    with pytest.raises(ConfigError, match="components"):
        parse_config("master:\n  components: apiserver\n")
    with pytest.raises(ConfigError, match="apiserver"):
        parse_config("master:\n  components: [apiserver]\n  apiserver:\n    optional: [nope]\n")


def test_unquoted_version_keys_are_rejected() -> None:
    with pytest.raises(ConfigError, match="quoted strings"):
        parse_config('version_mapping:\n  1.20: cis-1.20\n  "1.18": cis-1.6\n')


def test_config_error_is_a_kbench_error() -> None:
    assert issubclass(ConfigError, KbenchError)


def test_empty_document_has_no_nodes() -> None:
    assert parse_config("").nodes == {}


def test_component_accepts_field_names_and_aliases() -> None:
    by_name = Component(name="kubelet", binary_candidates=["kubelet"], default_service="kubelet.service")
    by_alias = Component.model_validate({"name": "kubelet", "bins": ["kubelet"], "defaultsvc": "kubelet.service"})

    assert by_name == by_alias


def test_bench_config_ignores_scalar_entries() -> None:
    config = BenchConfig.from_section({"components": ["kubelet"], "kubelet": {"bins": ["kubelet"]}, "note": "x"})

    assert set(config.definitions) == {"kubelet"}
