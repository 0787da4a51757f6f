# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Artifact commands: fossilize (commit) and excavate (status)."""

from __future__ import annotations

import argparse

from ...lib.vault import StrataError
from ...lib.vault.display import render_excavation
from ._common import engine_for, notice, report_failure, require_text


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register artifact subcommands."""
    p_fossilize = subparsers.add_parser("fossilize", help="Preserve code changes (git commit)")
    p_fossilize.add_argument("message", help="fossilization message")

    subparsers.add_parser("excavate", help="Check repository status")


def dispatch(args: argparse.Namespace) -> int | None:
    """Handle artifact commands.  Returns the exit status if handled."""
    if args.cmd == "fossilize":
        return _cmd_fossilize(args)
    if args.cmd == "excavate":
        return _cmd_excavate(args)
    return None


def _cmd_fossilize(args: argparse.Namespace) -> int:
    """Stage everything and commit it, unless the vault has nothing pending."""
    try:
        message = require_text(args.message, "fossilization message")
        engine = engine_for(args)
        status = engine.status()
        if not status.has_pending_changes():
            notice("No changes to fossilize")
            return 0
        engine.add(".")
        summary = engine.commit(message)
    except StrataError as exc:
        return report_failure("Fossilization", exc)
    print(f"📦 Fossilized changes: {summary.describe()}")
    return 0


def _cmd_excavate(args: argparse.Namespace) -> int:
    try:
        status = engine_for(args).status()
    except StrataError as exc:
        return report_failure("Excavation", exc)
    for line in render_excavation(status):
        print(line)
    return 0
