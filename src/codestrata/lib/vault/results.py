# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Operation results returned by the vault engine.

Each result is a small dataclass built from git's machine-readable
output by one of the ``parse_*`` helpers below. Results live only for the
duration of one command: the handler formats them and drops them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# Porcelain v1 XY pairs that mark an unmerged path.
_UNMERGED = {"DD", "AU", "UD", "UA", "DU", "AA", "UU"}

_STAGED_CODES = set("MADRCT")

_COMMIT_HEADER_RE = re.compile(
    r"^\[(?P<branch>.+?)(?P<root> \(root-commit\))? (?P<commit>[0-9a-f]{4,})\]"
)
_COMMIT_STATS_RE = re.compile(
    r"(?P<changes>\d+) files? changed"
    r"(?:, (?P<insertions>\d+) insertions?\(\+\))?"
    r"(?:, (?P<deletions>\d+) deletions?\(-\))?"
)

# Field separator used in ``git log --format`` output.
LOG_FIELD_SEP = "\x1f"


@dataclass
class StatusResult:
    """Working-tree paths partitioned the way ``excavate`` reports them."""

    modified: list[str] = field(default_factory=list)
    not_added: list[str] = field(default_factory=list)
    staged: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)

    def has_pending_changes(self) -> bool:
        """Return True if ``git add .`` would have anything to stage or commit."""
        return bool(self.staged or self.modified or self.deleted or self.not_added)


@dataclass
class BranchSummary:
    all: list[str] = field(default_factory=list)
    current: str | None = None


@dataclass
class CommitSummary:
    branch: str
    commit: str
    root: bool = False
    changes: int = 0
    insertions: int = 0
    deletions: int = 0

    def describe(self) -> str:
        """Render the change counts the way git reports them, plus branch and hash."""
        files = "file" if self.changes == 1 else "files"
        insertions = "insertion" if self.insertions == 1 else "insertions"
        deletions = "deletion" if self.deletions == 1 else "deletions"
        return (
            f"{self.changes} {files} changed, "
            f"{self.insertions} {insertions}(+), "
            f"{self.deletions} {deletions}(-) "
            f"[{self.branch} {self.commit}]"
        )


@dataclass
class MergeCommit:
    hash: str
    subject: str
    is_merge: bool = False


@dataclass
class MergeSummary:
    branch: str
    commits: list[MergeCommit] = field(default_factory=list)

    @property
    def already_up_to_date(self) -> bool:
        return not self.commits


def parse_status(output: str) -> StatusResult:
    """Parse ``git status --porcelain=v1 -z`` output into a ``StatusResult``.

    Entries are NUL-separated ``XY path`` records; renames and copies are
    followed by an extra record holding the original path, which is skipped.
    """
    status = StatusResult()
    entries = output.split("\0")
    i = 0
    while i < len(entries):
        entry = entries[i]
        i += 1
        if len(entry) < 4:
            continue
        xy, path = entry[:2], entry[3:]
        index = xy[0]
        if index in "RC":
            i += 1

        if xy == "??":
            status.not_added.append(path)
            continue
        if xy == "!!":
            continue
        if xy in _UNMERGED:
            status.modified.append(path)
            continue

        if "M" in xy or "T" in xy:
            status.modified.append(path)
        if "D" in xy:
            status.deleted.append(path)
        if index in _STAGED_CODES:
            status.staged.append(path)
    return status


def parse_branches(output: str) -> BranchSummary:
    """Parse ``git branch --format=%(HEAD)%(refname:short)`` output.

    Each line starts with ``*`` for the checked-out branch and a space otherwise.
    """
    summary = BranchSummary()
    for line in output.splitlines():
        if not line.strip():
            continue
        marker, name = line[0], line[1:].strip()
        summary.all.append(name)
        if marker == "*":
            summary.current = name
    return summary


def parse_commit(output: str) -> CommitSummary:
    """Parse the human-readable summary ``git commit`` prints on success."""
    branch, commit, root = "", "", False
    header = _COMMIT_HEADER_RE.search(output.strip().splitlines()[0] if output.strip() else "")
    if header:
        branch = header.group("branch")
        commit = header.group("commit")
        root = bool(header.group("root"))

    summary = CommitSummary(branch=branch, commit=commit, root=root)
    stats = _COMMIT_STATS_RE.search(output)
    if stats:
        summary.changes = int(stats.group("changes"))
        summary.insertions = int(stats.group("insertions") or 0)
        summary.deletions = int(stats.group("deletions") or 0)
    return summary


def parse_merge_log(output: str, branch: str) -> MergeSummary:
    """Parse ``git log --format=%h%x1f%s%x1f%p`` output for the commits a merge added."""
    summary = MergeSummary(branch=branch)
    for line in output.splitlines():
        if not line.strip():
            continue
        parts = line.split(LOG_FIELD_SEP)
        commit_hash = parts[0].strip()
        subject = parts[1] if len(parts) > 1 else ""
        parents = parts[2].split() if len(parts) > 2 else []
        summary.commits.append(
            MergeCommit(hash=commit_hash, subject=subject, is_merge=len(parents) > 1)
        )
    return summary
