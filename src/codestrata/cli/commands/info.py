# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Informational CLI commands: resolved configuration overview."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from ...lib.core.config import (
    get_default_branch as _get_default_branch,
    get_default_remote as _get_default_remote,
    get_git_binary as _get_git_binary,
    get_lenient_exit as _get_lenient_exit,
    global_config_path as _global_config_path,
    global_config_search_paths as _global_config_search_paths,
    log_path as _log_path,
    state_root as _state_root,
)
from ...ui_utils.terminal import (
    gray as _gray,
    supports_color as _supports_color,
    violet as _violet,
    yes_no as _yes_no,
)


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register informational subcommands (config)."""
    subparsers.add_parser("config", help="Show configuration, defaults and log paths")


def dispatch(args: argparse.Namespace) -> int | None:
    """Handle the config command.  Returns the exit status if handled."""
    if args.cmd == "config":
        _print_config()
        return 0
    return None


def _print_config() -> None:
    """Display configuration files, resolved settings and writable locations."""
    color_enabled = _supports_color()

    print("Configuration (read):")
    gcfg = _global_config_path()
    print(
        f"- Global config file: {_gray(str(gcfg), color_enabled)} "
        f"(exists: {_yes_no(Path(gcfg).is_file(), color_enabled)})"
    )
    paths = _global_config_search_paths()
    if paths:
        print("- Global config search order:")
        for p in paths:
            exists = Path(p).is_file()
            print(f"  • {_gray(str(p), color_enabled)} (exists: {_yes_no(exists, color_enabled)})")

    print("Settings:")
    print(f"- git binary: {_violet(_get_git_binary(), color_enabled)}")
    print(f"- Default remote vault: {_violet(_get_default_remote(), color_enabled)}")
    print(f"- Default stratum for uplift: {_violet(_get_default_branch(), color_enabled)}")
    print(f"- Lenient exit status: {_yes_no(_get_lenient_exit(), color_enabled)}")

    print("Writable locations (write):")
    sroot = _state_root()
    print(
        f"- State root: {_gray(str(sroot), color_enabled)} "
        f"(exists: {_yes_no(Path(sroot).is_dir(), color_enabled)})"
    )
    print(f"- Debug log: {_gray(str(_log_path()), color_enabled)}")

    print("Environment overrides (if set):")
    for var in (
        "STRATA_CONFIG_FILE",
        "STRATA_CONFIG_DIR",
        "STRATA_STATE_DIR",
        "STRATA_LENIENT_EXIT",
        "XDG_DATA_HOME",
        "XDG_CONFIG_HOME",
    ):
        val = os.environ.get(var)
        if val is not None:
            print(f"- {var}={_gray(val, color_enabled)}")
