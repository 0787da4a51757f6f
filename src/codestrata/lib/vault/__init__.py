# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""StrataVault access: the git engine, its results and their display."""

from .engine import GitEngine
from .errors import InvalidArgumentsError, StrataError, VaultCommandError
from .results import BranchSummary, CommitSummary, MergeCommit, MergeSummary, StatusResult

__all__ = [
    "BranchSummary",
    "CommitSummary",
    "GitEngine",
    "InvalidArgumentsError",
    "MergeCommit",
    "MergeSummary",
    "StatusResult",
    "StrataError",
    "VaultCommandError",
]
