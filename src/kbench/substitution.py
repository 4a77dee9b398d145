# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Substitute resolved artifacts into ``$token`` placeholders of audit commands."""

from __future__ import annotations

import logging
import re
import shlex
from collections.abc import Mapping

from .resolution.artifacts import ResolvedArtifacts

LOGGER = logging.getLogger(__name__)


def _token_pattern(token: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![\w$]){re.escape(token)}(?!\w)")


def multi_word_replace(text: str, token: str, value: str) -> str:
    """Replace whole-word occurrences of ``token`` in ``text`` with ``value``.

    Values made of several words are shell-quoted so the substituted
    command keeps them as one shell word.

    Args:
        text: Command template.
        token: Placeholder to replace, for example ``"$apiserverbin"``.
        value: Replacement value.

    Returns:
        str: Text with every occurrence replaced.
    """

    if len(value.split()) > 1:
        value = shlex.quote(value)
    return _token_pattern(token).sub(lambda _match: value, text)


def make_substitutions(
    text: str,
    suffix: str,
    substitutions: Mapping[str, str],
) -> tuple[str, list[str]]:
    """Apply ``$<key><suffix>`` substitutions to ``text``.

    Entries with an empty value, or whose placeholder does not occur in
    ``text``, are skipped.

    Args:
        text: Command template.
        suffix: Placeholder suffix, for example ``"bin"`` or ``"conf"``.
        substitutions: Replacement values keyed by component name.

    Returns:
        tuple[str, list[str]]: Rendered text and the values actually applied.
    """

    applied: list[str] = []
    for key, value in substitutions.items():
        token = f"${key}{suffix}"
        if not value:
            LOGGER.debug("no substitution for %r", token)
            continue
        if token not in text:
            continue
        rendered = multi_word_replace(text, token, value)
        if rendered != text:
            LOGGER.debug("substituting %s with %r", token, value)
            applied.append(value)
            text = rendered
    return text, applied


def render_command(text: str, artifacts: ResolvedArtifacts) -> tuple[str, list[str]]:
    """Substitute every resolved binary and file path into ``text``.

    Args:
        text: Command template.
        artifacts: Artifacts resolved for the node.

    Returns:
        tuple[str, list[str]]: Rendered text and the values applied.
    """

    applied: list[str] = []
    for suffix, table in artifacts.substitution_tables():
        text, used = make_substitutions(text, suffix, table)
        applied.extend(used)
    return text, applied


__all__ = ["make_substitutions", "multi_word_replace", "render_command"]
