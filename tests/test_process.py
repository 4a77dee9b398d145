# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for process-table matching."""

from __future__ import annotations

import subprocess

import pytest

from kbench.errors import ExecutableNotFoundError
from kbench.process import PS_COMMAND, ProcessMatcher, ps_snapshot


def test_verify_bin_matches_single_and_multi_word_names(matcher_for) -> None:
    assert matcher_for("single").verify_bin("single")
    assert not matcher_for("").verify_bin("single")
    assert matcher_for("two words").verify_bin("two words")
    assert not matcher_for("").verify_bin("two words")


def test_verify_bin_matches_leading_words_of_command_line(matcher_for) -> None:
    snapshot = "cmd param1 param2"

    assert matcher_for(snapshot).verify_bin("cmd")
    assert matcher_for(snapshot).verify_bin("cmd param")
    assert not matcher_for("cmd").verify_bin("cmd param")


def test_verify_bin_checks_every_line(matcher_for) -> None:
    matcher = matcher_for("cmd x \ncmd y")

    assert matcher.verify_bin("cmd")
    assert matcher.verify_bin("cmd y")
    assert not matcher.verify_bin("cmd z")


def test_verify_bin_respects_path_component_boundaries(matcher_for) -> None:
    assert matcher_for("/usr/bin/cmd").verify_bin("cmd")
    assert matcher_for("/usr/local/bin/cmd --flag=1").verify_bin("cmd")
    assert not matcher_for("kube-cmd").verify_bin("cmd")
    assert not matcher_for("/usr/bin/kube-cmd").verify_bin("cmd")


def test_verify_bin_ignores_names_in_later_arguments(matcher_for) -> None:
    snapshot = "/usr/bin/kube-apiserver --kubeconfig=/etc/kubernetes/kubelet.conf"

    assert not matcher_for(snapshot).verify_bin("kubelet")


def test_verify_bin_matches_inside_multi_column_rows(matcher_for) -> None:
    ps_ef = "root      1234     1  3 10:01 ?        00:12:01 /usr/bin/kubelet --config=/var/lib/kubelet/config.yaml"
    ps_aux = "root 987 0.3 1.2 812344 99120 ? Ssl 10:01 1:02 hyperkube apiserver --secure-port=6443"

    assert matcher_for(ps_ef).verify_bin("kubelet")
    assert matcher_for(ps_aux).verify_bin("hyperkube apiserver")
    assert not matcher_for(ps_aux).verify_bin("apiserver")
    assert not matcher_for("root 1 0.0 /usr/bin/kube-kubelet").verify_bin("kubelet")
    assert not matcher_for("root 1 0.0 /usr/bin/etcd --kubeconfig /etc/kubernetes/kubelet.conf").verify_bin(
        "kubelet",
    )


def test_verify_bin_strips_quotes_and_queries_first_word() -> None:
    queried: list[str] = []

    def lister(name: str) -> str:
        queried.append(name)
        return "hyperkube apiserver --secure-port=6443"

    matcher = ProcessMatcher(lister)

    assert matcher.verify_bin("'hyperkube apiserver'")
    assert queried == ["hyperkube"]
    assert not matcher.verify_bin("  ")


def test_verify_bin_escapes_regex_characters(matcher_for) -> None:
    assert not matcher_for("cmdxplus").verify_bin("cmd.plus")
    assert matcher_for("/opt/c++/cmd.plus").verify_bin("cmd.plus")


def test_find_executable_returns_first_running_candidate(matcher_for) -> None:
    assert matcher_for("two").find_executable(["one", "two", "three"]) == "two"
    assert matcher_for("two three").find_executable(["one", "two", "three"]) == "two"
    assert (
        matcher_for("two double is running").find_executable(["one double", "two double", "three double"])
        == "two double"
    )
    assert matcher_for("kube-apiserver").find_executable(["apiserver", "kube-apiserver"]) == "kube-apiserver"
    assert (
        matcher_for("kube-apiserver").find_executable(["apiserver", "kube-apiserver", "hyperkube-apiserver"])
        == "kube-apiserver"
    )


def test_find_executable_raises_when_nothing_runs(matcher_for) -> None:
    with pytest.raises(ExecutableNotFoundError) as excinfo:
        matcher_for("blah").find_executable(["one", "two", "three"])
    assert excinfo.value.candidates == ("one", "two", "three")

    with pytest.raises(ExecutableNotFoundError):
        matcher_for("two").find_executable(["one double", "two double", "three double"])


def test_ps_snapshot_returns_stdout(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_run_command(args, *, check=True, timeout=None):
        captured["args"] = list(args)
        captured["check"] = check
        return subprocess.CompletedProcess(args, 0, stdout="/usr/bin/kubelet --v=2\n", stderr="")

    monkeypatch.setattr("kbench.process.run_command", fake_run_command)

    assert ps_snapshot("kubelet") == "/usr/bin/kubelet --v=2\n"
    assert captured["args"] == [*PS_COMMAND, "kubelet"]
    assert captured["check"] is False


def test_ps_snapshot_is_empty_without_ps(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run_command(args, *, check=True, timeout=None):
        raise FileNotFoundError("Executable 'ps' was not found on PATH")

    monkeypatch.setattr("kbench.process.run_command", fake_run_command)

    assert ps_snapshot("kubelet") == ""
