# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the debug log helper."""

import unittest
import unittest.mock

from test_utils import RecordingTask, dispatcher_with, isolated_env

from appletsh.lib._util.logging_utils import _log_debug, debug_enabled
from appletsh.lib.core.errors import GrammarError


class DebugLogTests(unittest.TestCase):
    def test_disabled_by_default(self) -> None:
        with isolated_env() as base:
            self.assertFalse(debug_enabled())
            _log_debug("hello")
            self.assertFalse((base / "state" / "appletsh.log").exists())

    def test_env_enables(self) -> None:
        with isolated_env(extra_env={"APPLETSH_DEBUG": "1"}) as base:
            _log_debug("hello")
            log = (base / "state" / "appletsh.log").read_text(encoding="utf-8")
            self.assertIn("hello", log)
            self.assertTrue(log.startswith("["))

    def test_env_zero_disables_even_with_config(self) -> None:
        with isolated_env("debug: true\n", extra_env={"APPLETSH_DEBUG": "0"}):
            self.assertFalse(debug_enabled())

    def test_config_enables(self) -> None:
        with isolated_env("debug: true\n"):
            self.assertTrue(debug_enabled())

    def test_dispatcher_logs_dispatch_and_rejection(self) -> None:
        with isolated_env(extra_env={"APPLETSH_DEBUG": "1"}) as base:
            cli = dispatcher_with(RecordingTask("a"))
            cli.run("a")
            with self.assertRaises(GrammarError):
                cli.run("nope")
            log = (base / "state" / "appletsh.log").read_text(encoding="utf-8")
            self.assertIn("root: dispatch a", log)
            self.assertIn("root: rejected 'nope'", log)

    def test_config_is_read_once(self) -> None:
        with isolated_env("debug: true\n"):
            with unittest.mock.patch(
                "appletsh.lib.core.config.load_global_config", return_value={"debug": True}
            ) as load:
                for i in range(3):
                    _log_debug(f"line {i}")
                self.assertTrue(debug_enabled())
            self.assertEqual(load.call_count, 1)

    def test_env_is_checked_on_every_call(self) -> None:
        with isolated_env("debug: true\n"):
            self.assertTrue(debug_enabled())
            with unittest.mock.patch.dict("os.environ", {"APPLETSH_DEBUG": "0"}):
                self.assertFalse(debug_enabled())
