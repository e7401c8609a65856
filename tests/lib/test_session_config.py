# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for config file discovery and the session section."""

import os
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from test_utils import isolated_env

from appletsh.lib.core import config as cfg
from appletsh.lib.core import paths


class ConfigPathTests(unittest.TestCase):
    def test_search_paths_env_override(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "config.yml"
            with unittest.mock.patch.dict(os.environ, {"APPLETSH_CONFIG_FILE": str(cfg_path)}):
                self.assertEqual(cfg.global_config_search_paths(), [cfg_path.resolve()])
                self.assertEqual(cfg.global_config_path(), cfg_path.resolve())

    def test_search_paths_use_config_root(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            env = {k: v for k, v in os.environ.items() if k != "APPLETSH_CONFIG_FILE"}
            env["APPLETSH_CONFIG_DIR"] = td
            with unittest.mock.patch.dict(os.environ, env, clear=True):
                search = cfg.global_config_search_paths()
                self.assertEqual(search[0], Path(td) / "config.yml")
                self.assertEqual(search[-1], Path("/etc/appletsh/config.yml"))

    def test_first_existing_path_wins(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            user_cfg = Path(td) / "config.yml"
            user_cfg.write_text("debug: true\n", encoding="utf-8")
            env = {k: v for k, v in os.environ.items() if k != "APPLETSH_CONFIG_FILE"}
            env["APPLETSH_CONFIG_DIR"] = td
            with unittest.mock.patch.dict(os.environ, env, clear=True):
                self.assertEqual(cfg.global_config_path(), user_cfg.resolve())
                self.assertEqual(cfg.load_global_config(), {"debug": True})

    def test_state_root_env_override(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with unittest.mock.patch.dict(os.environ, {"APPLETSH_STATE_DIR": td}):
                self.assertEqual(paths.state_root(), Path(td))


class SessionSettingsTests(unittest.TestCase):
    def test_missing_file_gives_defaults(self) -> None:
        with isolated_env():
            self.assertEqual(cfg.load_global_config(), {})
            self.assertEqual(cfg.get_session_settings(), cfg.SessionSettings())

    def test_values_are_read(self) -> None:
        text = "session:\n  label: 'db> '\n  label_color: ansigreen\n  history_size: 10\n"
        with isolated_env(text):
            self.assertEqual(
                cfg.get_session_settings(),
                cfg.SessionSettings(label="db> ", label_color="ansigreen", history_size=10),
            )

    def test_wrong_types_are_ignored(self) -> None:
        text = "session:\n  label: 5\n  label_color: [red]\n  history_size: -1\n"
        with isolated_env(text):
            self.assertEqual(cfg.get_session_settings(), cfg.SessionSettings())

    def test_boolean_history_size_is_ignored(self) -> None:
        with isolated_env("session:\n  history_size: true\n"):
            self.assertIsNone(cfg.get_session_settings().history_size)

    def test_non_mapping_section_is_ignored(self) -> None:
        with isolated_env("session: oops\n"):
            self.assertEqual(cfg.get_global_section("session"), {})

    def test_non_mapping_document_is_ignored(self) -> None:
        with isolated_env("- just\n- a list\n"):
            self.assertEqual(cfg.load_global_config(), {})

    def test_broken_yaml_gives_defaults(self) -> None:
        with isolated_env("session: [unclosed\n"):
            self.assertEqual(cfg.get_session_settings(), cfg.SessionSettings())
