# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Emoji display-width utilities for aligned artifact and strata lists.

Terminals disagree on the width of emoji that rely on Variation Selector-16
(U+FE0F), e.g. 🗺️ or 🏛️: Rich's ``cell_len`` reports 2 cells while most
terminals draw 1. Natively wide emoji (``East_Asian_Width=W``, e.g. 📝 ✅ ✨)
are 2 cells everywhere.

Every emoji that starts a *list line* in strata output must therefore be
natively wide; the guard tests in ``tests/lib/test_emoji.py`` check the
marker table in ``codestrata.lib.vault.display``. Headline decorations may
use VS16 emoji and are followed by two spaces instead, so the text starts in
the same column whichever width the terminal picks.

How to check a candidate emoji::

    python3 -c "
    import unicodedata
    e = '📍'  # paste your candidate here
    print(f'eaw={unicodedata.east_asian_width(e)}')  # must be 'W'
    print(f'vs16={chr(0xFE0F) in e}')                # must be False
    "
"""

from rich.cells import cell_len


def draw_emoji(emoji: str, width: int = 2) -> str:
    """Pad emojis to a consistent cell width for list alignment."""
    if not emoji:
        return ""
    try:
        emoji_width = cell_len(emoji)
    except (TypeError, ValueError):
        return emoji
    if emoji_width >= width:
        return emoji
    return f"{emoji}{' ' * (width - emoji_width)}"


def is_natively_wide(emoji: str) -> bool:
    """Return True if *emoji* is a 2-cell glyph without a VS16 selector."""
    return bool(emoji) and "\ufe0f" not in emoji and cell_len(emoji) == 2
