# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the best-effort debug log."""

import unittest
import unittest.mock

from test_utils import strata_env

from codestrata.lib.util.logging_utils import _log_debug


class LogDebugTests(unittest.TestCase):
    def test_appends_timestamped_lines(self) -> None:
        with strata_env() as env:
            _log_debug("git status (cwd=/tmp)")
            _log_debug("Excavation failed: boom")
            lines = (env.state_dir / "strata.log").read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 2)
        self.assertRegex(lines[0], r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] git status")
        self.assertTrue(lines[1].endswith("Excavation failed: boom"))

    def test_creates_state_directory(self) -> None:
        with strata_env() as env:
            self.assertFalse(env.state_dir.exists())
            _log_debug("hello")
            self.assertTrue((env.state_dir / "strata.log").is_file())

    def test_io_errors_are_ignored(self) -> None:
        with strata_env():
            with unittest.mock.patch(
                "codestrata.lib.core.config.log_path", side_effect=OSError("read-only")
            ):
                _log_debug("never written")

    def test_unwritable_log_location(self) -> None:
        with strata_env() as env:
            blocker = env.base / "blocker"
            blocker.write_text("", encoding="utf-8")
            with unittest.mock.patch.dict(
                "os.environ", {"STRATA_STATE_DIR": str(blocker / "state")}
            ):
                _log_debug("never written")
            self.assertEqual(blocker.read_text(encoding="utf-8"), "")


if __name__ == "__main__":
    unittest.main()
