# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Display tables and line rendering for strata command output.

Handlers in ``codestrata.cli.commands`` print what these helpers return;
keeping the markers here lets the emoji guard tests check every list marker
in one place.
"""

from __future__ import annotations

from dataclasses import dataclass

from .._util.ansi import red, yellow
from ..util.emoji import draw_emoji
from .results import BranchSummary, MergeSummary, StatusResult


@dataclass(frozen=True)
class SectionInfo:
    """Display attributes for one excavation section."""

    title: str
    emoji: str


# Insertion order is the print order: modified, untracked, staged.
ARTIFACT_SECTIONS: dict[str, SectionInfo] = {
    "modified": SectionInfo(title="Modified artifacts", emoji="📝"),
    "not_added": SectionInfo(title="Untracked artifacts", emoji="❓"),
    "staged": SectionInfo(title="Staged artifacts", emoji="✅"),
}

CURRENT_STRATUM_EMOJI = "✨"
STRATUM_EMOJI = "📍"
FUSED_COMMIT_EMOJI = "🔗"

LIST_MARKERS: tuple[str, ...] = (
    *(info.emoji for info in ARTIFACT_SECTIONS.values()),
    CURRENT_STRATUM_EMOJI,
    STRATUM_EMOJI,
    FUSED_COMMIT_EMOJI,
)


def _list_line(emoji: str, text: str) -> str:
    return f"  {draw_emoji(emoji)} {text}"


def render_excavation(status: StatusResult) -> list[str]:
    """Render the excavation report; sections with no paths are left out."""
    lines = ["", "📊 Current excavation status:"]
    for attr, info in ARTIFACT_SECTIONS.items():
        paths: list[str] = getattr(status, attr)
        if not paths:
            continue
        lines.append("")
        lines.append(f"{info.title}:")
        lines.extend(_list_line(info.emoji, path) for path in paths)
    return lines


def render_strata_map(summary: BranchSummary) -> list[str]:
    """Render every local stratum, marking the current one with ✨."""
    lines = ["🗺️  Available strata:"]
    for name in summary.all:
        emoji = CURRENT_STRATUM_EMOJI if name == summary.current else STRATUM_EMOJI
        lines.append(_list_line(emoji, name))
    return lines


def render_fusion(summary: MergeSummary) -> list[str]:
    if summary.already_up_to_date:
        return ["ℹ️  Strata already fused"]
    lines = [f"🔥 Fused stratum: {summary.branch}"]
    lines.extend(
        _list_line(FUSED_COMMIT_EMOJI, f"{commit.hash} {commit.subject}")
        for commit in summary.commits
    )
    return lines


def one_line(message: str) -> str:
    """Collapse a multi-line git message into a single line."""
    return " ".join(line.strip() for line in message.splitlines() if line.strip())


def format_failure(action: str, message: str, color_enabled: bool = False) -> str:
    """Return the ``❌ <action> failed: <message>`` line."""
    return red(f"❌ {action} failed: {one_line(message)}", color_enabled)


def format_notice(text: str, color_enabled: bool = False) -> str:
    """Return an informational ``ℹ️`` line."""
    return yellow(f"ℹ️  {text}", color_enabled)
