# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from colflow.cli.commands import config as config_module


class TestEditorCommand(unittest.TestCase):
    def test_explicit_editor_is_split(self) -> None:
        cases = (
            ("code -w", ["code", "-w"]),
            ("  nano  ", ["nano"]),
            ("'my editor' --wait", ["my editor", "--wait"]),
            ("", None),
            ("   ", None),
            ("default", None),
            ("SYSTEM", None),
        )
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertEqual(config_module._editor_command(value), expected)

    @mock.patch.dict(os.environ, {"VISUAL": "nvim -u NONE", "EDITOR": "nano"}, clear=True)
    def test_visual_wins_over_editor(self) -> None:
        self.assertEqual(config_module._editor_command(None), ["nvim", "-u", "NONE"])

    @mock.patch.dict(os.environ, {"EDITOR": "vi"}, clear=True)
    def test_editor_env_is_used_without_visual(self) -> None:
        self.assertEqual(config_module._editor_command(None), ["vi"])

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_no_editor_means_system_opener(self) -> None:
        self.assertIsNone(config_module._editor_command(None))


class TestEdit(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.path = Path(self._tmpdir.name) / "colflow.toml"
        self.path.write_text("[layout]\n", encoding="utf-8")

    def test_missing_file_raises(self) -> None:
        with self.assertRaisesRegex(FileNotFoundError, "config file not found"):
            config_module._edit(self.path.with_name("absent.toml"), editor="vi", quiet=True)

    @mock.patch("colflow.cli.commands.config.typer.launch")
    @mock.patch("colflow.cli.commands.config.subprocess.run")
    @mock.patch("colflow.cli.commands.config.console")
    def test_editor_command_runs_subprocess(
        self,
        console: mock.MagicMock,
        run: mock.MagicMock,
        launch: mock.MagicMock,
    ) -> None:
        config_module._edit(self.path, editor="code -w", quiet=False)
        config_module._edit(self.path, editor="code -w", quiet=True)
        self.assertEqual(run.call_count, 2)
        run.assert_called_with(["code", "-w", str(self.path)], check=False)
        launch.assert_not_called()
        console.print.assert_called_once()

    @mock.patch.dict(os.environ, {}, clear=True)
    @mock.patch("colflow.cli.commands.config.typer.launch")
    @mock.patch("colflow.cli.commands.config.subprocess.run")
    @mock.patch("colflow.cli.commands.config.console")
    def test_without_editor_falls_back_to_system_opener(
        self,
        console: mock.MagicMock,
        run: mock.MagicMock,
        launch: mock.MagicMock,
    ) -> None:
        config_module._edit(self.path, editor=None, quiet=True)
        launch.assert_called_once_with(str(self.path))
        run.assert_not_called()
        console.print.assert_not_called()


if __name__ == "__main__":
    unittest.main()
