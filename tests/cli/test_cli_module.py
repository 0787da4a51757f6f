# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import importlib
import unittest
from contextlib import redirect_stdout
from io import StringIO
from unittest import mock

EXPECTED_COMMANDS = {
    "create-vault",
    "fossilize",
    "stratum-shift",
    "excavate",
    "uplift",
    "connect-vault",
    "unearth",
    "shift-to",
    "map-strata",
    "fuse-strata",
    "preserve",
    "erode-strata",
    "erode-remote-strata",
    "config",
}


class CliModuleTests(unittest.TestCase):
    def test_cli_main_is_callable(self) -> None:
        module = importlib.import_module("codestrata.cli.main")
        self.assertTrue(callable(getattr(module, "main", None)))

    def test_parser_registers_every_command(self) -> None:
        from codestrata.cli.main import build_parser

        parser = build_parser()
        subparsers = next(
            action for action in parser._actions if action.dest == "cmd"  # noqa: SLF001
        )
        self.assertEqual(set(subparsers.choices), EXPECTED_COMMANDS)

    def test_version_flag(self) -> None:
        from codestrata.cli.main import main

        buf = StringIO()
        with (
            mock.patch(
                "codestrata.cli.main.get_version_info", return_value=("1.0.0", "feature-x")
            ),
            redirect_stdout(buf),
            self.assertRaises(SystemExit) as ctx,
        ):
            main(["--version"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn("strata 1.0.0 [feature-x]", buf.getvalue())
        self.assertIn("License: Apache-2.0", buf.getvalue())

    def test_uplift_defaults_are_optional_positionals(self) -> None:
        from codestrata.cli.main import build_parser

        args = build_parser().parse_args(["uplift"])
        self.assertIsNone(args.remote)
        self.assertIsNone(args.branch)
        args = build_parser().parse_args(["uplift", "backup", "develop"])
        self.assertEqual((args.remote, args.branch), ("backup", "develop"))


class CompleterTests(unittest.TestCase):
    def _parsed(self) -> argparse.Namespace:
        return argparse.Namespace(vault=None)

    def test_complete_strata_filters_by_prefix(self) -> None:
        from codestrata.cli.commands._completers import complete_strata
        from codestrata.lib.vault import BranchSummary

        engine = mock.MagicMock()
        engine.branches.return_value = BranchSummary(
            all=["feature/a", "feature/b", "master"], current="master"
        )
        with mock.patch("codestrata.cli.commands._completers.GitEngine", return_value=engine):
            self.assertEqual(
                complete_strata("feat", self._parsed()), ["feature/a", "feature/b"]
            )
            self.assertEqual(len(complete_strata("", self._parsed())), 3)

    def test_complete_remotes_outside_vault(self) -> None:
        from codestrata.cli.commands._completers import complete_remotes
        from codestrata.lib.vault import VaultCommandError

        engine = mock.MagicMock()
        engine.remotes.side_effect = VaultCommandError(["git", "remote"], 128, "fatal")
        with mock.patch("codestrata.cli.commands._completers.GitEngine", return_value=engine):
            self.assertEqual(complete_remotes("o", self._parsed()), [])

    def test_strata_arguments_have_completers(self) -> None:
        from codestrata.cli.commands._completers import complete_strata
        from codestrata.cli.main import build_parser

        parser = build_parser()
        subparsers = next(
            a for a in parser._actions if a.__class__.__name__ == "_SubParsersAction"
        )
        shift_to = subparsers.choices["shift-to"]
        name_action = next(a for a in shift_to._actions if a.dest == "name")
        self.assertIs(name_action.completer, complete_strata)


if __name__ == "__main__":
    unittest.main()
