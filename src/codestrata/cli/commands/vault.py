# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Vault commands: create-vault, connect-vault, uplift, unearth, preserve."""

from __future__ import annotations

import argparse

from ...lib.core.config import get_default_branch, get_default_remote
from ...lib.vault import StrataError
from ._common import engine_for, notice, report_failure, require_text
from ._completers import complete_remotes, complete_strata, set_completer


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register vault-level subcommands."""
    subparsers.add_parser("create-vault", help="Initialize a new StrataVault (git init)")

    p_connect = subparsers.add_parser(
        "connect-vault", help="Connect to remote vault (git remote add)"
    )
    p_connect.add_argument("name", help="remote name")
    p_connect.add_argument("url", help="remote vault URL")

    p_uplift = subparsers.add_parser("uplift", help="Push changes to remote (git push)")
    set_completer(
        p_uplift.add_argument(
            "remote", nargs="?", default=None, help="remote name (default: origin)"
        ),
        complete_remotes,
    )
    set_completer(
        p_uplift.add_argument(
            "branch", nargs="?", default=None, help="branch name (default: master)"
        ),
        complete_strata,
    )

    p_unearth = subparsers.add_parser("unearth", help="Fetch changes from remote (git fetch)")
    set_completer(
        p_unearth.add_argument(
            "remote", nargs="?", default=None, help="remote name (default: origin)"
        ),
        complete_remotes,
    )

    subparsers.add_parser("preserve", help="Stash working-tree changes (git stash)")


def dispatch(args: argparse.Namespace) -> int | None:
    """Handle vault-level commands.  Returns the exit status if handled."""
    if args.cmd == "create-vault":
        return _cmd_create_vault(args)
    if args.cmd == "connect-vault":
        return _cmd_connect_vault(args)
    if args.cmd == "uplift":
        return _cmd_uplift(args)
    if args.cmd == "unearth":
        return _cmd_unearth(args)
    if args.cmd == "preserve":
        return _cmd_preserve(args)
    return None


def _cmd_create_vault(args: argparse.Namespace) -> int:
    try:
        engine_for(args).init()
    except StrataError as exc:
        return report_failure("Vault creation", exc)
    print("🏛️  New StrataVault created successfully")
    return 0


def _cmd_connect_vault(args: argparse.Namespace) -> int:
    try:
        name = require_text(args.name, "remote name")
        url = require_text(args.url, "remote vault URL")
        engine_for(args).add_remote(name, url)
    except StrataError as exc:
        return report_failure("Connection", exc)
    print(f"🔗 Connected to remote vault: {name}")
    return 0


def _cmd_uplift(args: argparse.Namespace) -> int:
    remote = args.remote or get_default_remote()
    branch = args.branch or get_default_branch()
    try:
        engine_for(args).push(remote, branch)
    except StrataError as exc:
        return report_failure("Uplift", exc)
    print("🚀 Uplifted changes to remote vault")
    return 0


def _cmd_unearth(args: argparse.Namespace) -> int:
    remote = args.remote or get_default_remote()
    try:
        engine_for(args).fetch(remote)
    except StrataError as exc:
        return report_failure("Unearthing", exc)
    print("🏺 Unearthed changes from remote vault")
    return 0


def _cmd_preserve(args: argparse.Namespace) -> int:
    try:
        stashed = engine_for(args).stash()
    except StrataError as exc:
        return report_failure("Preservation", exc)
    if not stashed:
        notice("No changes to preserve")
        return 0
    print("🧊 Preserved working changes")
    return 0
