from __future__ import annotations

import os
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from codestrata.lib.core import config as cfg


class ConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = unittest.mock.patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        for var in (
            "STRATA_CONFIG_FILE",
            "STRATA_CONFIG_DIR",
            "STRATA_STATE_DIR",
            "STRATA_LENIENT_EXIT",
        ):
            os.environ.pop(var, None)

    def _write_config(self, td: str, text: str) -> Path:
        cfg_path = Path(td) / "config.yml"
        cfg_path.write_text(text, encoding="utf-8")
        os.environ["STRATA_CONFIG_FILE"] = str(cfg_path)
        return cfg_path

    def test_global_config_search_paths_env_override(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "config.yml"
            os.environ["STRATA_CONFIG_FILE"] = str(cfg_path)
            self.assertEqual(cfg.global_config_search_paths(), [cfg_path.resolve()])
            # An explicit file is returned even when it does not exist.
            self.assertEqual(cfg.global_config_path(), cfg_path.resolve())
            self.assertEqual(cfg.load_global_config(), {})

    def test_config_dir_is_searched_first(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            os.environ["STRATA_CONFIG_DIR"] = td
            paths = cfg.global_config_search_paths()
            self.assertEqual(paths[0], Path(td) / "config.yml")
            self.assertEqual(paths[-1], Path("/etc/codestrata/config.yml"))

    def test_global_config_path_prefers_xdg(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            xdg = Path(td)
            config_file = xdg / "codestrata" / "config.yml"
            config_file.parent.mkdir(parents=True, exist_ok=True)
            config_file.write_text("defaults:\n  remote: upstream\n", encoding="utf-8")
            os.environ["XDG_CONFIG_HOME"] = str(xdg)
            self.assertEqual(cfg.global_config_path(), config_file.resolve())
            self.assertEqual(cfg.get_default_remote(), "upstream")

    def test_defaults_without_config(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self._write_config(td, "")
            self.assertEqual(cfg.get_git_binary(), "git")
            self.assertEqual(cfg.get_default_remote(), "origin")
            self.assertEqual(cfg.get_default_branch(), "master")
            self.assertFalse(cfg.get_lenient_exit())

    def test_settings_from_config(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self._write_config(
                td,
                "git:\n  binary: /usr/local/bin/git\n"
                "defaults:\n  remote: upstream\n  branch: main\n"
                "cli:\n  lenient_exit: true\n",
            )
            self.assertEqual(cfg.get_git_binary(), "/usr/local/bin/git")
            self.assertEqual(cfg.get_default_remote(), "upstream")
            self.assertEqual(cfg.get_default_branch(), "main")
            self.assertTrue(cfg.get_lenient_exit())

    def test_non_dict_sections_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self._write_config(td, 'git: "oops"\ndefaults:\n  - origin\n')
            self.assertEqual(cfg.get_global_section("git"), {})
            self.assertEqual(cfg.get_git_binary(), "git")
            self.assertEqual(cfg.get_default_remote(), "origin")

    def test_non_dict_document_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self._write_config(td, "- just\n- a list\n")
            self.assertEqual(cfg.load_global_config(), {})

    def test_invalid_yaml_is_treated_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self._write_config(td, "git: [unclosed\n  binary: :\n")
            self.assertEqual(cfg.load_global_config(), {})
            self.assertEqual(cfg.get_git_binary(), "git")
            self.assertFalse(cfg.get_lenient_exit())

    def test_lenient_env_wins_over_config(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self._write_config(td, "cli:\n  lenient_exit: true\n")
            os.environ["STRATA_LENIENT_EXIT"] = "0"
            self.assertFalse(cfg.get_lenient_exit())
            for value in ("1", "true", "YES", " on "):
                with self.subTest(value=value):
                    os.environ["STRATA_LENIENT_EXIT"] = value
                    self.assertTrue(cfg.get_lenient_exit())

    def test_state_root_env_override(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            os.environ["STRATA_STATE_DIR"] = td
            self.assertEqual(cfg.state_root(), Path(td).resolve())
            self.assertEqual(cfg.log_path(), Path(td).resolve() / "strata.log")

    def test_state_root_config_override(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            state_dir = Path(td) / "state"
            self._write_config(td, f"paths:\n  state_root: {state_dir}\n")
            self.assertEqual(cfg.state_root(), state_dir.resolve())

    def test_state_root_default_uses_platformdirs(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self._write_config(td, "")
            with (
                unittest.mock.patch("codestrata.lib.core.paths._is_root", return_value=False),
                unittest.mock.patch(
                    "codestrata.lib.core.paths.user_data_dir",
                    return_value=str(Path(td) / "data"),
                ),
            ):
                self.assertEqual(cfg.state_root(), (Path(td) / "data").resolve())

    def test_state_root_for_root_user(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self._write_config(td, "")
            with unittest.mock.patch("codestrata.lib.core.paths._is_root", return_value=True):
                self.assertEqual(cfg.state_root(), Path("/var/lib/codestrata").resolve())


if __name__ == "__main__":
    unittest.main()
