# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""CLI command modules.

Each module exposes ``register(subparsers)`` to add its argument parsers
and ``dispatch(args) -> int | None`` to handle parsed arguments.  The
dispatch function returns the command's exit status if it handled the
command, ``None`` otherwise.
"""
