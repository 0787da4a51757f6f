# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Failure kinds reported by strata commands.

The CLI maps them to exit statuses: ``InvalidArgumentsError`` → 2,
``VaultCommandError`` → 1.
"""


class StrataError(Exception):
    """Base class for errors a strata command reports instead of crashing."""

    exit_code = 1


class InvalidArgumentsError(StrataError, ValueError):
    """A required argument was missing or blank; git was not called."""

    exit_code = 2


class VaultCommandError(StrataError):
    """The external git call failed.

    ``message`` carries git's own explanation (stderr, or stdout when git
    wrote its complaint there, as ``git merge`` does for conflicts).
    """

    def __init__(self, args: list[str], returncode: int | None, message: str) -> None:
        super().__init__(message)
        self.git_args = list(args)
        self.returncode = returncode
        self.message = message
