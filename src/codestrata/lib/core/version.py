# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Version and branch information for codestrata.

Single source of truth for the string printed by ``strata --version``.
"""

import json
import subprocess
from importlib import metadata
from pathlib import Path
from typing import Any


def get_version_info() -> tuple[str, str | None]:
    """Get version and branch information.

    strata can run from a git checkout, from a PyPI release, or from a VCS
    install, and the branch name is only shown when it means something:

      1. INSTALLED FROM VCS URL (``pip install git+https://...``):
         PEP 610 ``direct_url.json`` records the requested revision.

      2. DEVELOPMENT MODE (git checkout with pyproject.toml next to ``src/``):
         Ask git for the current branch, unless HEAD sits on a ``vX.Y.Z`` tag.

      3. INSTALLED FROM A LOCAL GIT DIRECTORY:
         ``build_script.py`` wrote the branch into ``_branch_info.py``.

      4. RELEASES: version only.

    Returns:
        tuple: (version_string, branch_name) where branch_name is None for releases
               or when branch info is not available
    """
    # version.py -> core -> lib -> codestrata -> src -> repo
    repo_root = Path(__file__).parent.parent.parent.parent.parent

    try:
        from codestrata import __version__

        version = __version__
    except (ImportError, AttributeError):
        version = "unknown"

    pep610_revision = _get_pep610_revision()
    if pep610_revision:
        return version, pep610_revision

    if (repo_root / "pyproject.toml").exists():
        return version, _detect_live_branch(repo_root)

    try:
        from codestrata._branch_info import BRANCH_NAME
    except ImportError:
        BRANCH_NAME = None
    return version, BRANCH_NAME


def _detect_live_branch(repo_root: Path) -> str | None:
    """Return the checked-out branch of *repo_root*, or None on a release tag."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--is-inside-work-tree"],
            capture_output=True,
            text=True,
            timeout=1,
            cwd=str(repo_root),
        )
        if result.returncode != 0 or result.stdout.strip() != "true":
            return None
        branch_result = subprocess.run(
            ["git", "branch", "--show-current"],
            capture_output=True,
            text=True,
            timeout=1,
            cwd=str(repo_root),
        )
        detected_branch = branch_result.stdout.strip() if branch_result.returncode == 0 else ""
        if not detected_branch:
            return None
        tag_result = subprocess.run(
            ["git", "describe", "--exact-match", "--tags", "HEAD"],
            capture_output=True,
            text=True,
            timeout=1,
            cwd=str(repo_root),
        )
        tag = tag_result.stdout.strip()
        is_release = (
            tag_result.returncode == 0 and tag.startswith("v") and len(tag) > 1 and tag[1].isdigit()
        )
        return None if is_release else detected_branch
    except (OSError, subprocess.SubprocessError):
        return None


def _get_pep610_revision(dist_name: str = "codestrata") -> str | None:
    """Return VCS revision from PEP 610 metadata, if available."""
    try:
        dist = metadata.distribution(dist_name)
        direct_url = dist.read_text("direct_url.json")
    except (
        metadata.PackageNotFoundError,
        FileNotFoundError,
        PermissionError,
        UnicodeDecodeError,
        OSError,
    ):
        return None

    if not direct_url:
        return None

    try:
        data = json.loads(direct_url)
    except json.JSONDecodeError:
        return None

    vcs_info = data.get("vcs_info")
    if not isinstance(vcs_info, dict):
        return None

    def validate_and_strip(value: Any) -> str | None:
        """Validate that value is a non-empty string after stripping whitespace."""
        if isinstance(value, str):
            stripped = value.strip()
            if stripped:
                return stripped
        return None

    if result := validate_and_strip(vcs_info.get("requested_revision")):
        return result

    if result := validate_and_strip(vcs_info.get("commit_id")):
        return result

    return None


def format_version_string(version: str, branch: str | None) -> str:
    """Format version and branch into a display string.

    Args:
        version: The version string (e.g., "1.0.0")
        branch: The branch name or None

    Returns:
        Formatted string like "1.0.0" or "1.0.0 [feature-branch]"
    """
    base_version = version
    if branch:
        base_version = f"{version} [{branch}]"

    return f"{base_version}\nLicense: Apache-2.0"
