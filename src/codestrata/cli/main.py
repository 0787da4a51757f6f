#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse

import argcomplete

from ..lib.core.config import get_lenient_exit
from ..lib.core.version import format_version_string, get_version_info
from .commands import artifacts, info, strata, vault

_COMMAND_MODULES = (vault, artifacts, strata, info)


def build_parser() -> argparse.ArgumentParser:
    version, branch = get_version_info()
    version_string = format_version_string(version, branch)

    parser = argparse.ArgumentParser(
        prog="strata",
        description="Codestrata CLI for managing StrataVaults",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Quick start:\n"
            "  1. Vault:     strata create-vault\n"
            "  2. Record:    strata fossilize \"first layer\"\n"
            "  3. Branch:    strata stratum-shift feature   (then: strata map-strata)\n"
            "  4. Share:     strata connect-vault origin <url> && strata uplift\n"
            "\n"
            "Exit status: 0 on success, 1 when git fails, 2 on invalid arguments\n"
            "(always 0 with --lenient-exit, STRATA_LENIENT_EXIT=1 or cli.lenient_exit).\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"strata {version_string}")
    parser.add_argument(
        "-C",
        "--vault",
        metavar="PATH",
        default=None,
        help="Run as if strata was started in PATH instead of the working directory",
    )
    parser.add_argument(
        "--lenient-exit",
        action="store_true",
        help="Report failures but exit with status 0",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)
    for module in _COMMAND_MODULES:
        module.register(sub)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    argcomplete.autocomplete(parser)

    args = parser.parse_args(argv)

    for module in _COMMAND_MODULES:
        status = module.dispatch(args)
        if status is not None:
            break
    else:
        parser.error("Unknown command")

    if status and (args.lenient_exit or get_lenient_exit()):
        return 0
    return status


if __name__ == "__main__":
    raise SystemExit(main())
