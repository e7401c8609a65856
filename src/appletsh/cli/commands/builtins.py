"""Built-in applets: echo, quit, exit."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from ...lib._util.ansi import COLORS, named, supports_color
from ...lib.core.grammar import Grammar
from ...lib.core.suggest import complete
from ...lib.core.task import TaskAction

_ECHO_OPTIONS = ("-n", "--color")


def _echo_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-n",
        dest="no_newline",
        action="store_true",
        help="Do not print the trailing newline",
    )
    parser.add_argument(
        "--color",
        choices=sorted(COLORS),
        default=None,
        help="Print in this color (honors NO_COLOR / FORCE_COLOR)",
    )
    parser.add_argument("words", nargs="*", help="Words to print")


class Echo:
    """Print its arguments, like the shell builtin."""

    def grammar(self) -> Grammar:
        return Grammar(
            name="echo",
            help="Print words to standard output",
            arguments=_echo_arguments,
        )

    def execute(self, matches: argparse.Namespace) -> TaskAction:
        text = " ".join(matches.words)
        if matches.color:
            text = named(text, matches.color, supports_color())
        print(text, end="" if matches.no_newline else "\n", flush=True)
        return TaskAction.CONTINUE

    def suggest(self, tokens: Sequence[str]) -> str | None:
        if not tokens:
            return None
        *done, last = tokens
        if done and done[-1] == "--color":
            return " ".join([*done, complete(COLORS, last)])
        option, sep, value = last.partition("=")
        if sep:
            if option != "--color":
                return None
            return " ".join([*done, f"--color={complete(COLORS, value)}"])
        if last.startswith("-"):
            return " ".join([*done, complete(_ECHO_OPTIONS, last)])
        return None


class Quit:
    """Leave the interactive loop (``BREAK``)."""

    def grammar(self) -> Grammar:
        return Grammar(name="quit", help="Leave the interactive loop")

    def execute(self, matches: argparse.Namespace) -> TaskAction:
        return TaskAction.BREAK

    def suggest(self, tokens: Sequence[str]) -> str | None:
        return None


class Exit:
    """Stop the shell (``EXIT``)."""

    def grammar(self) -> Grammar:
        return Grammar(name="exit", help="Exit the shell")

    def execute(self, matches: argparse.Namespace) -> TaskAction:
        return TaskAction.EXIT

    def suggest(self, tokens: Sequence[str]) -> str | None:
        return None
