# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""The external version-control interface: a thin wrapper over the git binary.

Every method issues exactly one mutating git call (``merge`` additionally
reads HEAD before and the log after) and either returns a parsed result or
raises :class:`VaultCommandError` with git's own message.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from ..core.config import get_git_binary
from ..util.logging_utils import _log_debug
from .errors import VaultCommandError
from .results import (
    BranchSummary,
    CommitSummary,
    MergeSummary,
    StatusResult,
    parse_branches,
    parse_commit,
    parse_merge_log,
    parse_status,
)

NO_LOCAL_CHANGES = "No local changes to save"

# Result parsers match git's untranslated messages.
GIT_LOCALE = "C"


class GitEngine:
    """Run git commands against the vault rooted at *cwd* (default: working dir)."""

    def __init__(self, cwd: str | Path | None = None, binary: str | None = None) -> None:
        self.cwd = Path(cwd).expanduser() if cwd is not None else None
        self.binary = binary or get_git_binary()

    def run(self, *args: str) -> str:
        """Run ``git <args>`` and return stdout; raise ``VaultCommandError`` on failure."""
        cmd = [self.binary, *args]
        where = str(self.cwd) if self.cwd is not None else os.getcwd()
        _log_debug(f"git {' '.join(args)} (cwd={where})")

        if self.cwd is not None and not self.cwd.is_dir():
            raise VaultCommandError(cmd, None, f"Vault directory not found: {self.cwd}")

        try:
            result = subprocess.run(
                cmd,
                cwd=str(self.cwd) if self.cwd is not None else None,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                env={**os.environ, "LC_ALL": GIT_LOCALE},
                check=False,
            )
        except FileNotFoundError as exc:
            raise VaultCommandError(cmd, None, f"{self.binary} executable not found") from exc
        except OSError as exc:
            raise VaultCommandError(cmd, None, str(exc)) from exc

        if result.returncode != 0:
            message = (
                (result.stderr or "").strip()
                or (result.stdout or "").strip()
                or f"git {args[0] if args else ''} exited with status {result.returncode}"
            )
            _log_debug(f"git {' '.join(args)} failed ({result.returncode}): {message}")
            raise VaultCommandError(cmd, result.returncode, message)
        return result.stdout or ""

    # ---------- Vault ----------

    def init(self) -> None:
        self.run("init")

    def add_remote(self, name: str, url: str) -> None:
        self.run("remote", "add", name, url)

    def remotes(self) -> list[str]:
        return [line.strip() for line in self.run("remote").splitlines() if line.strip()]

    def push(self, remote: str, branch: str) -> None:
        self.run("push", remote, branch)

    def push_delete(self, remote: str, name: str) -> None:
        self.run("push", remote, "--delete", name)

    def fetch(self, remote: str) -> None:
        self.run("fetch", remote)

    def stash(self) -> bool:
        """Stash working-tree changes. Returns False when git had nothing to stash."""
        output = self.run("stash", "push")
        return NO_LOCAL_CHANGES not in output

    # ---------- Artifacts ----------

    def status(self) -> StatusResult:
        return parse_status(self.run("status", "--porcelain=v1", "-z", "-u"))

    def add(self, pathspec: str = ".") -> None:
        self.run("add", pathspec)

    def commit(self, message: str) -> CommitSummary:
        return parse_commit(self.run("commit", "-m", message))

    # ---------- Strata ----------

    def branches(self) -> BranchSummary:
        return parse_branches(
            self.run("branch", "--list", "--no-color", "--format=%(HEAD)%(refname:short)")
        )

    def checkout(self, name: str) -> None:
        self.run("checkout", name)

    def checkout_local_branch(self, name: str) -> None:
        self.run("checkout", "-b", name)

    def delete_local_branch(self, name: str, *, force: bool = False) -> None:
        self.run("branch", "-D" if force else "-d", name)

    def head(self) -> str | None:
        """Return the full hash of HEAD, or None in a vault without commits."""
        try:
            return self.run("rev-parse", "--verify", "-q", "HEAD").strip() or None
        except VaultCommandError:
            return None

    def merge(self, branch: str, *, allow_unrelated_histories: bool = False) -> MergeSummary:
        """Merge *branch* into the current stratum with ``--no-ff``.

        Returns the commits the merge added to HEAD, merge commit first.
        """
        before = self.head()
        args = ["merge", "--no-ff", "--no-edit"]
        if allow_unrelated_histories:
            args.append("--allow-unrelated-histories")
        args.append(branch)
        self.run(*args)

        after = self.head()
        if after is None or after == before:
            return MergeSummary(branch=branch)
        revision_range = f"{before}..{after}" if before else after
        log = self.run("log", "--format=%h%x1f%s%x1f%p", revision_range)
        return parse_merge_log(log, branch)
