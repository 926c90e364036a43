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

import tempfile
import unittest
from pathlib import Path

from colflow.config import installer
from tests.test_support import temp_env


class TestConfigInstaller(unittest.TestCase):
    def test_xdg_override_sets_user_config_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with temp_env({"XDG_CONFIG_HOME": tmpdir}):
                self.assertEqual(
                    installer.user_config_path(),
                    Path(tmpdir) / "colflow" / "config.toml",
                )

    def test_init_user_config_copies_defaults_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with temp_env({"XDG_CONFIG_HOME": tmpdir}):
                self.assertTrue(installer.user_config_needs_init())
                config_dir = installer.init_user_config()
                target = config_dir / "config.toml"
                self.assertEqual(
                    target.read_text(encoding="utf-8"),
                    installer.DEFAULT_CONFIG_PATH.read_text(encoding="utf-8"),
                )
                self.assertFalse(installer.user_config_needs_init())

                target.write_text("[layout]\ncolumns = 2\n", encoding="utf-8")
                installer.init_user_config()
                self.assertEqual(target.read_text(encoding="utf-8"), "[layout]\ncolumns = 2\n")

    def test_resolve_config_path_precedence(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            explicit = Path(tmpdir) / "explicit.toml"
            from_env = Path(tmpdir) / "env.toml"
            with temp_env({"XDG_CONFIG_HOME": tmpdir, "COLFLOW_CONFIG": ""}):
                self.assertEqual(installer.resolve_config_path(), installer.DEFAULT_CONFIG_PATH)
                installer.init_user_config()
                self.assertEqual(installer.resolve_config_path(), installer.user_config_path())
            with temp_env({"XDG_CONFIG_HOME": tmpdir, "COLFLOW_CONFIG": str(from_env)}):
                self.assertEqual(installer.resolve_config_path(), from_env)
                self.assertEqual(installer.resolve_config_path(explicit), explicit)


if __name__ == "__main__":
    unittest.main()
