# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring resolution commands."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, Final

import typer
from rich import box
from rich.table import Table

from ..config import DEFAULT_NODE_TYPE, BenchConfig, ConfigError, FileCategory, RunConfig, load_config
from ..errors import KbenchError
from ..logging import configure_verbose_logging, fail, get_console, info, ok, section, warn
from ..platform import (
    Platform,
    get_benchmark_version,
    get_platform_benchmark_version,
    get_platform_info_from_version,
    get_version_from_kubectl_output,
)
from ..probes import HostProbe
from ..process import ProcessMatcher, ps_snapshot
from ..resolution import BinaryResolver, FileResolver, resolve_artifacts
from ..rulesets import DEFAULT_CONFIG_DIR, get_config_file_path, get_yaml_files_from_dir
from ..substitution import render_command

DEFAULT_CONFIG_PATH: Final[Path] = DEFAULT_CONFIG_DIR / "config.yaml"
EXIT_RESOLUTION_ERROR: Final[int] = 1
EXIT_CONFIG_ERROR: Final[int] = 2

ConfigOption = Annotated[Path, typer.Option("--config", "-c", help="Benchmark configuration file.")]
NodeTypeOption = Annotated[str, typer.Option("--node-type", "-n", help="Node type section to resolve.")]
NoEmojiOption = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")]

app = typer.Typer(
    help="Resolve Kubernetes benchmark components to host artifacts.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log resolution decisions to stderr.")] = False,
) -> None:
    """Resolve Kubernetes benchmark components to host artifacts."""

    if verbose:
        configure_verbose_logging()


def _load_run_config(path: Path, *, use_emoji: bool) -> RunConfig:
    try:
        return load_config(path)
    except ConfigError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc


def _load_node(path: Path, node_type: str, *, use_emoji: bool) -> BenchConfig:
    run_config = _load_run_config(path, use_emoji=use_emoji)
    try:
        return run_config.node(node_type)
    except ConfigError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from exc


def _binary_resolver() -> BinaryResolver:
    return BinaryResolver(ProcessMatcher(ps_snapshot))


def _file_resolver() -> FileResolver:
    return FileResolver(os.stat)


def _abort(exc: KbenchError, *, use_emoji: bool) -> typer.Exit:
    fail(str(exc), use_emoji=use_emoji)
    return typer.Exit(code=EXIT_RESOLUTION_ERROR)


@app.command("binaries")
def binaries_command(
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    node_type: NodeTypeOption = DEFAULT_NODE_TYPE,
    no_emoji: NoEmojiOption = False,
) -> None:
    """Show the running binary resolved for each component."""

    use_emoji = not no_emoji
    bench = _load_node(config, node_type, use_emoji=use_emoji)
    try:
        binaries = _binary_resolver().get_binaries(bench)
    except KbenchError as exc:
        raise _abort(exc, use_emoji=use_emoji) from exc

    table = Table(title=f"Binaries ({node_type})", box=box.SIMPLE)
    table.add_column("Component", style="bold")
    table.add_column("Binary")
    for name, binary in sorted(binaries.items()):
        table.add_row(name, binary)
    get_console(color=False, emoji=use_emoji).print(table)
    skipped = [name for name in bench.components if name not in binaries]
    if skipped:
        warn(f"Not resolved: {', '.join(skipped)}", use_emoji=use_emoji)


@app.command("files")
def files_command(
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    node_type: NodeTypeOption = DEFAULT_NODE_TYPE,
    category: Annotated[FileCategory, typer.Option("--category", help="File category to resolve.")] = (
        FileCategory.CONFIG
    ),
    no_emoji: NoEmojiOption = False,
) -> None:
    """Show the file path resolved for each component and where it came from."""

    use_emoji = not no_emoji
    bench = _load_node(config, node_type, use_emoji=use_emoji)
    try:
        resolved = _file_resolver().resolve(bench, category)
    except KbenchError as exc:
        raise _abort(exc, use_emoji=use_emoji) from exc

    table = Table(title=f"{category.value.title()} files ({node_type})", box=box.SIMPLE)
    table.add_column("Component", style="bold")
    table.add_column("Path")
    table.add_column("Source")
    for name, item in sorted(resolved.items()):
        table.add_row(name, item.value, item.source.value)
    get_console(color=False, emoji=use_emoji).print(table)


def _platform_from_text(text: str) -> Platform:
    if text.lstrip().startswith("{"):
        text = get_version_from_kubectl_output(text).git_version
    return get_platform_info_from_version(text)


@app.command("platform")
def platform_command(
    version: Annotated[
        str | None,
        typer.Argument(help="Version string or kubectl JSON; detected from the host when omitted."),
    ] = None,
    no_emoji: NoEmojiOption = False,
) -> None:
    """Detect the platform and the benchmark profile that applies to it."""

    use_emoji = not no_emoji
    platform = HostProbe().platform() if version is None else _platform_from_text(version)
    if not platform.detected:
        info("No platform detected; the generic benchmark applies.", use_emoji=use_emoji)
        return
    profile = get_platform_benchmark_version(platform) or "<generic>"
    ok(f"Platform {platform.name} {platform.version} -> {profile}", use_emoji=use_emoji)


@app.command("benchmark")
def benchmark_command(
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    node_type: NodeTypeOption = DEFAULT_NODE_TYPE,
    kube_version: Annotated[str, typer.Option("--version", help="Kubernetes version to assume.")] = "",
    benchmark: Annotated[str, typer.Option("--benchmark", help="Benchmark profile to run.")] = "",
    cfg_dir: Annotated[Path, typer.Option("--cfg-dir", help="Ruleset root directory.")] = DEFAULT_CONFIG_DIR,
    no_emoji: NoEmojiOption = False,
) -> None:
    """Select the benchmark profile and list its rule files."""

    use_emoji = not no_emoji
    run_config = _load_run_config(config, use_emoji=use_emoji)
    probe = HostProbe()
    try:
        platform = probe.platform() if not (kube_version or benchmark) else None
        selected = get_benchmark_version(
            kube_version=kube_version,
            benchmark_version=benchmark,
            platform=platform,
            version_mapping=run_config.version_mapping,
            kube_version_provider=probe.kube_version,
        )
        directory = get_config_file_path(selected, f"{node_type}.yaml", cfg_dir=cfg_dir)
        rule_files = get_yaml_files_from_dir(directory)
    except KbenchError as exc:
        raise _abort(exc, use_emoji=use_emoji) from exc
    except OSError as exc:
        fail(f"unable to read rulesets: {exc}", use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_RESOLUTION_ERROR) from exc

    section(f"Benchmark {selected}", use_color=False)
    for path in rule_files:
        typer.echo(str(path))


@app.command("render")
def render_command_cli(
    template: Annotated[str, typer.Argument(help="Audit command containing $<component><suffix> placeholders.")],
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    node_type: NodeTypeOption = DEFAULT_NODE_TYPE,
    no_emoji: NoEmojiOption = False,
) -> None:
    """Render an audit command with resolved binaries and paths."""

    use_emoji = not no_emoji
    bench = _load_node(config, node_type, use_emoji=use_emoji)
    try:
        artifacts = resolve_artifacts(
            bench,
            binary_resolver=_binary_resolver(),
            file_resolver=_file_resolver(),
        )
    except KbenchError as exc:
        raise _abort(exc, use_emoji=use_emoji) from exc
    rendered, _applied = render_command(template, artifacts)
    typer.echo(rendered)


__all__ = ["app"]
