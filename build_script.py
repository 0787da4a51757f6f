#!/usr/bin/env python3
"""
Record the git branch of the source checkout in codestrata/_branch_info.py.

Called by setup.py before packaging so that ``strata --version`` can still
name the branch after a ``pip install /path/to/checkout``.
"""

import subprocess
from pathlib import Path

BRANCH_INFO_PATH = Path("src/codestrata/_branch_info.py")

BRANCH_INFO_TEMPLATE = """\
# Generated by build_script.py while packaging from a git checkout.
BRANCH_NAME = {branch!r}
"""


def _git(*args: str) -> str | None:
    try:
        result = subprocess.run(["git", *args], capture_output=True, text=True, timeout=1)
    except (OSError, subprocess.SubprocessError):
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip()


def get_git_branch() -> str | None:
    """Return the checked-out branch, or None outside a work tree or on a detached HEAD."""
    if _git("rev-parse", "--is-inside-work-tree") != "true":
        return None
    return _git("branch", "--show-current") or None


def write_branch_info(branch_name: str | None, path: Path = BRANCH_INFO_PATH) -> bool:
    """Write *branch_name* into the generated module. Returns True on success."""
    if branch_name is None:
        return False
    try:
        path.write_text(BRANCH_INFO_TEMPLATE.format(branch=branch_name), encoding="utf-8")
    except OSError as e:
        print(f"Warning: Could not write branch info: {e}")
        return False
    print(f"Recorded stratum for --version: {branch_name}")
    return True


def main():
    branch_name = get_git_branch()
    if branch_name is None:
        print("No git branch detected; --version will show the release number only")
        return
    write_branch_info(branch_name)


if __name__ == "__main__":
    main()
