# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Declarative command grammars on top of argparse.

A ``Grammar`` is built fresh by ``Task.grammar()`` and can either produce a
standalone parser or attach itself to a parent's subparsers.  Parsers built
here never print and never exit the process: every rejection, and every
help request, is raised as ``GrammarError`` with the text argparse would
have printed.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn

from .errors import GrammarError

HELP_APPLET = "help"

# Namespace keys filled in when the generated ``help`` applet is selected.
_HELP_OWNER = "_help_owner"
_HELP_CHOICES = "_help_choices"
_HELP_TARGET = "_help_target"


class GrammarParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        text = f"error: {message}"
        usage = self.format_usage().strip()
        if usage:
            text += f"\n\n{usage}"
        raise GrammarError(text)

    def print_help(self, file=None) -> NoReturn:  # type: ignore[override]
        raise GrammarError(self.format_help().rstrip())

    def print_usage(self, file=None) -> NoReturn:  # type: ignore[override]
        raise GrammarError(self.format_usage().rstrip())

    def _print_message(self, message: str, file=None) -> None:
        # Actions such as ``version`` print before calling ``exit()``.
        if message:
            raise GrammarError(message.rstrip())

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        raise GrammarError((message or "").rstrip())


@dataclass(frozen=True)
class Grammar:
    """Name, help texts and arguments of one command.

    Args:
        name: Applet name, also the first word of its command lines.
        help: One-line summary shown in the parent's command list.
        description: Longer text for ``<name> -h``; defaults to *help*.
        epilog: Text printed after the argument list.
        arguments: Callback adding arguments to a freshly built parser.
    """

    name: str
    help: str | None = None
    description: str | None = None
    epilog: str | None = None
    arguments: Callable[[argparse.ArgumentParser], None] | None = None

    def _parser_kwargs(self) -> dict:
        return {
            "prog": self.name,
            "description": self.description or self.help,
            "epilog": self.epilog,
            "formatter_class": argparse.RawDescriptionHelpFormatter,
        }

    def configure(self, parser: argparse.ArgumentParser) -> None:
        if self.arguments is not None:
            self.arguments(parser)

    def parser(self, **kwargs: object) -> GrammarParser:
        """Build a standalone parser; *kwargs* override the defaults."""
        parser = GrammarParser(**{**self._parser_kwargs(), **kwargs})
        self.configure(parser)
        return parser

    def attach(
        self, subparsers: argparse._SubParsersAction[argparse.ArgumentParser]
    ) -> argparse.ArgumentParser:
        """Add this grammar as a subcommand of *subparsers*.

        The subcommand's ``prog`` is the bare name, so usage lines read
        ``usage: echo ...`` rather than ``usage: root echo ...``.
        """
        parser = subparsers.add_parser(self.name, help=self.help, **self._parser_kwargs())
        self.configure(parser)
        return parser


def add_help_applet(
    owner: argparse.ArgumentParser,
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
) -> None:
    """Add a ``help [APPLET]`` subcommand listing or describing applets."""
    p_help = subparsers.add_parser(
        HELP_APPLET,
        prog=HELP_APPLET,
        help="Print this message or the help of the given applet",
    )
    p_help.add_argument(_HELP_TARGET, nargs="?", metavar="APPLET")
    p_help.set_defaults(**{_HELP_OWNER: owner, _HELP_CHOICES: subparsers.choices})


def requested_help(namespace: argparse.Namespace) -> str | None:
    """Return the help text asked for by a ``help`` line, or None.

    Raises:
        GrammarError: when ``help`` names an unknown applet.
    """
    owner = getattr(namespace, _HELP_OWNER, None)
    if owner is None:
        return None
    target = getattr(namespace, _HELP_TARGET, None)
    if target is None:
        return owner.format_help().rstrip()
    parser = getattr(namespace, _HELP_CHOICES).get(target)
    if parser is None:
        owner.error(f"unrecognized applet '{target}'")
    return parser.format_help().rstrip()
