# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Stratum (branch) commands: shift, map, fuse and erode."""

from __future__ import annotations

import argparse

from ...lib.core.config import get_default_remote
from ...lib.vault import StrataError
from ...lib.vault.display import render_fusion, render_strata_map
from ._common import engine_for, report_failure, require_text
from ._completers import complete_strata, set_completer


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register stratum subcommands."""
    p_shift = subparsers.add_parser("stratum-shift", help="Create new code layer (git branch)")
    p_shift.add_argument("name", help="shift name")

    p_shift_to = subparsers.add_parser(
        "shift-to", help="Switch to different code layer (git checkout)"
    )
    set_completer(p_shift_to.add_argument("name", help="branch name"), complete_strata)

    subparsers.add_parser("map-strata", help="List all code layers (git branch --list)")

    p_fuse = subparsers.add_parser(
        "fuse-strata", help="Fuse a code layer into the current one (git merge --no-ff)"
    )
    set_completer(p_fuse.add_argument("branch", help="stratum to fuse"), complete_strata)
    p_fuse.add_argument(
        "--allow-unrelated-histories",
        action="store_true",
        help="Allow fusing strata that share no common ancestor",
    )

    p_erode = subparsers.add_parser("erode-strata", help="Delete a code layer (git branch -d)")
    set_completer(p_erode.add_argument("name", help="stratum to erode"), complete_strata)
    p_erode.add_argument(
        "--force",
        action="store_true",
        help="Erode even if the stratum has not been fused (git branch -D)",
    )

    p_erode_remote = subparsers.add_parser(
        "erode-remote-strata",
        help="Delete a code layer on the remote vault (git push origin --delete)",
    )
    p_erode_remote.add_argument("name", help="remote stratum to erode")


def dispatch(args: argparse.Namespace) -> int | None:
    """Handle stratum commands.  Returns the exit status if handled."""
    if args.cmd == "stratum-shift":
        return _cmd_stratum_shift(args)
    if args.cmd == "shift-to":
        return _cmd_shift_to(args)
    if args.cmd == "map-strata":
        return _cmd_map_strata(args)
    if args.cmd == "fuse-strata":
        return _cmd_fuse_strata(args)
    if args.cmd == "erode-strata":
        return _cmd_erode_strata(args)
    if args.cmd == "erode-remote-strata":
        return _cmd_erode_remote_strata(args)
    return None


def _cmd_stratum_shift(args: argparse.Namespace) -> int:
    try:
        name = require_text(args.name, "stratum name")
        engine_for(args).checkout_local_branch(name)
    except StrataError as exc:
        return report_failure("Stratum shift", exc)
    print(f"🌿 Created new stratum: {name}")
    return 0


def _cmd_shift_to(args: argparse.Namespace) -> int:
    try:
        name = require_text(args.name, "stratum name")
        engine_for(args).checkout(name)
    except StrataError as exc:
        return report_failure("Shift", exc)
    print(f"🔄 Shifted to stratum: {name}")
    return 0


def _cmd_map_strata(args: argparse.Namespace) -> int:
    try:
        summary = engine_for(args).branches()
    except StrataError as exc:
        return report_failure("Mapping", exc)
    for line in render_strata_map(summary):
        print(line)
    return 0


def _cmd_fuse_strata(args: argparse.Namespace) -> int:
    try:
        branch = require_text(args.branch, "stratum name")
        summary = engine_for(args).merge(
            branch, allow_unrelated_histories=args.allow_unrelated_histories
        )
    except StrataError as exc:
        return report_failure("Fusion", exc)
    for line in render_fusion(summary):
        print(line)
    return 0


def _cmd_erode_strata(args: argparse.Namespace) -> int:
    try:
        name = require_text(args.name, "stratum name")
        engine_for(args).delete_local_branch(name, force=args.force)
    except StrataError as exc:
        return report_failure("Erosion", exc)
    print(f"🪨 Eroded stratum: {name}")
    return 0


def _cmd_erode_remote_strata(args: argparse.Namespace) -> int:
    remote = get_default_remote()
    try:
        name = require_text(args.name, "stratum name")
        engine_for(args).push_delete(remote, name)
    except StrataError as exc:
        return report_failure("Remote erosion", exc)
    print(f"🌊 Eroded remote stratum: {name}")
    return 0
