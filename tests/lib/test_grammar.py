# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for Grammar and GrammarParser."""

import argparse
import unittest

from appletsh.lib.core.errors import GrammarError
from appletsh.lib.core.grammar import Grammar, GrammarParser


def _copy_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("source")
    parser.add_argument("--count", type=int, default=1)


COPY = Grammar(name="copy", help="Copy a thing", arguments=_copy_arguments)


class GrammarParserTests(unittest.TestCase):
    """GrammarParser raises instead of printing or exiting."""

    def test_missing_argument_raises(self) -> None:
        with self.assertRaises(GrammarError) as ctx:
            COPY.parser().parse_args([])
        self.assertTrue(str(ctx.exception).startswith("error: "))
        self.assertIn("source", str(ctx.exception))

    def test_invalid_typed_value_raises(self) -> None:
        with self.assertRaises(GrammarError) as ctx:
            COPY.parser().parse_args(["a", "--count", "many"])
        self.assertIn("invalid int value", str(ctx.exception))

    def test_unconsumed_tokens_raise(self) -> None:
        with self.assertRaises(GrammarError) as ctx:
            COPY.parser().parse_args(["a", "b"])
        self.assertIn("unrecognized arguments", str(ctx.exception))

    def test_help_flag_raises_help_text(self) -> None:
        with self.assertRaises(GrammarError) as ctx:
            COPY.parser().parse_args(["-h"])
        text = str(ctx.exception)
        self.assertIn("usage", text)
        self.assertIn("Copy a thing", text)
        self.assertIn("--count", text)

    def test_exit_raises(self) -> None:
        with self.assertRaises(GrammarError):
            GrammarParser(prog="x").exit(2, "bye\n")

    def test_version_action_raises_version_text(self) -> None:
        parser = GrammarParser(prog="x")
        parser.add_argument("--version", action="version", version="x 1.0")
        with self.assertRaises(GrammarError) as ctx:
            parser.parse_args(["--version"])
        self.assertEqual(str(ctx.exception), "x 1.0")


class GrammarTests(unittest.TestCase):
    """Grammar builds standalone and attached parsers."""

    def test_parser_parses(self) -> None:
        ns = COPY.parser().parse_args(["a", "--count", "3"])
        self.assertEqual(ns.source, "a")
        self.assertEqual(ns.count, 3)

    def test_parser_is_rebuilt_each_call(self) -> None:
        self.assertIsNot(COPY.parser(), COPY.parser())

    def test_description_defaults_to_help(self) -> None:
        self.assertEqual(COPY.parser().description, "Copy a thing")

    def test_grammar_without_arguments(self) -> None:
        ns = Grammar(name="quit").parser().parse_args([])
        self.assertEqual(vars(ns), {})

    def test_attach_uses_bare_prog(self) -> None:
        root = GrammarParser(prog="root")
        sub = root.add_subparsers(dest="cmd")
        attached = COPY.attach(sub)
        self.assertEqual(attached.prog, "copy")
        self.assertIsInstance(attached, GrammarParser)
        ns = root.parse_args(["copy", "x"])
        self.assertEqual((ns.cmd, ns.source), ("copy", "x"))
