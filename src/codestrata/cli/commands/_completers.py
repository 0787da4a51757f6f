# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Shared argcomplete completers and helpers for CLI commands."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from typing import Any

from ...lib.vault import GitEngine, StrataError


def _filter(names: list[str], prefix: str) -> list[str]:
    if prefix:
        return [n for n in names if n.startswith(prefix)]
    return names


def complete_strata(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:  # pragma: no cover - shell integration
    """Return local stratum names matching *prefix* for argcomplete."""
    try:
        names = GitEngine(getattr(parsed_args, "vault", None)).branches().all
    except StrataError:
        return []
    return _filter(names, prefix)


def complete_remotes(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:  # pragma: no cover - shell integration
    """Return configured remote vault names matching *prefix* for argcomplete."""
    try:
        names = GitEngine(getattr(parsed_args, "vault", None)).remotes()
    except StrataError:
        return []
    return _filter(names, prefix)


def set_completer(action: argparse.Action, fn: Callable[..., Any]) -> None:
    """Attach an argcomplete completer to *action*."""
    action.completer = fn  # type: ignore[attr-defined]
