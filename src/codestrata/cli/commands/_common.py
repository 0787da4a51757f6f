# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Helpers shared by the command handlers: engine lookup, validation, failures."""

from __future__ import annotations

import argparse
import sys

from ...lib._util.ansi import supports_color
from ...lib.util.logging_utils import _log_debug
from ...lib.vault import GitEngine, InvalidArgumentsError, StrataError
from ...lib.vault.display import format_failure, format_notice


def engine_for(args: argparse.Namespace) -> GitEngine:
    """Return a git engine for the vault selected with ``-C/--vault``."""
    return GitEngine(getattr(args, "vault", None))


def require_text(value: str | None, name: str) -> str:
    """Return *value* or raise ``InvalidArgumentsError`` when it is blank."""
    if value is None or not value.strip():
        raise InvalidArgumentsError(f"{name} must not be empty")
    return value


def report_failure(action: str, exc: StrataError) -> int:
    """Print the one-line failure for *action* to stderr and return its exit status."""
    _log_debug(f"{action} failed: {exc}")
    print(format_failure(action, str(exc), supports_color(sys.stderr)), file=sys.stderr)
    return exc.exit_code


def notice(text: str) -> None:
    print(format_notice(text, supports_color()))
