# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line interface for kbench; the Typer application lives in :mod:`kbench.cli.app`."""
