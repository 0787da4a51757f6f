# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the emoji display-width utility."""

import unittest

from codestrata.lib.util.emoji import draw_emoji, is_natively_wide


class TestDrawEmoji(unittest.TestCase):
    """Verify draw_emoji pads emojis to a consistent cell width."""

    def test_empty_string_returns_empty(self):
        self.assertEqual(draw_emoji(""), "")

    def test_wide_emoji_no_padding(self):
        """A natively 2-cell-wide emoji (eaw=W) needs no padding."""
        self.assertEqual(draw_emoji("📝"), "📝")

    def test_narrow_char_gets_padded(self):
        self.assertEqual(draw_emoji("X"), "X ")

    def test_custom_width(self):
        self.assertEqual(draw_emoji("X", width=4), "X   ")

    def test_emoji_wider_than_target(self):
        self.assertEqual(draw_emoji("🔥", width=1), "🔥")


class TestListMarkers(unittest.TestCase):
    """Every emoji that starts a list line must be 2 cells in every terminal."""

    def test_is_natively_wide(self):
        self.assertTrue(is_natively_wide("✨"))
        self.assertFalse(is_natively_wide("🗺️"))
        self.assertFalse(is_natively_wide("X"))
        self.assertFalse(is_natively_wide(""))

    def test_all_list_markers_are_natively_wide(self):
        from codestrata.lib.vault.display import LIST_MARKERS

        self.assertTrue(LIST_MARKERS)
        for emoji in LIST_MARKERS:
            with self.subTest(emoji=emoji):
                self.assertTrue(is_natively_wide(emoji), f"{emoji!r} is not natively wide")
                self.assertEqual(draw_emoji(emoji, width=3), f"{emoji} ")

    def test_artifact_sections_in_display_order(self):
        from codestrata.lib.vault.display import ARTIFACT_SECTIONS

        self.assertEqual(list(ARTIFACT_SECTIONS), ["modified", "not_added", "staged"])
        self.assertEqual(
            [info.emoji for info in ARTIFACT_SECTIONS.values()], ["📝", "❓", "✅"]
        )


if __name__ == "__main__":
    unittest.main()
