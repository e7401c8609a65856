# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Multicall dispatcher: many applets behind one command surface.

The ``Dispatcher`` owns a name → task registry and is itself a task, so
dispatchers nest.  It merges every applet's grammar under one root parser,
routes parsed lines to the selected applet and routes Tab completion to the
applet named by the first word.
"""

from __future__ import annotations

import argparse
import shlex
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from .._util.logging_utils import _log_debug
from .errors import AppletError, GrammarError, QuotingError
from .grammar import HELP_APPLET, Grammar, GrammarParser, add_help_applet, requested_help
from .suggest import complete
from .task import Task, TaskAction

if TYPE_CHECKING:
    from ...ui.session import SessionBuilder


class Dispatcher:
    """Root task composing registered applets.

    Applets are registered with the chainable ``add_task``::

        cli = Dispatcher("demo").add_task(Echo()).add_task(Quit())
        cli.run_interactive()

    The registry is sealed the first time the dispatcher parses, executes
    or completes a line; registering afterwards raises ``RuntimeError``.
    """

    def __init__(self, name: str, *, help: str | None = None) -> None:
        self.name = name
        self.help = help
        self._tasks: dict[str, Task] = {}
        self._sealed = False
        # Namespace key holding the selected applet; unique per dispatcher
        # so nested dispatchers do not overwrite each other's selection.
        self._dest = f"_applet_{name}"

    # -- registry --

    def add_task(self, task: Task) -> Dispatcher:
        """Register *task* under its grammar name and return ``self``.

        Raises:
            ValueError: the name is ``help`` or already registered.
            RuntimeError: the dispatcher is already in use.
        """
        if self._sealed:
            raise RuntimeError(f"cannot add tasks to '{self.name}' after it has been used")
        name = task.grammar().name
        if name == HELP_APPLET:
            raise ValueError(f"'{HELP_APPLET}' is reserved for the generated help applet")
        if name in self._tasks:
            raise ValueError(f"an applet named '{name}' is already registered in '{self.name}'")
        self._tasks[name] = task
        return self

    @property
    def names(self) -> list[str]:
        """Registered applet names, in registration order."""
        return list(self._tasks)

    def _seal(self) -> None:
        self._sealed = True

    # -- Task protocol --

    def grammar(self) -> Grammar:
        return Grammar(
            name=self.name,
            help=self.help,
            arguments=self._add_applets,
        )

    def _add_applets(self, parser: argparse.ArgumentParser) -> None:
        sub = parser.add_subparsers(
            dest=self._dest,
            metavar="APPLET",
            title="Commands",
            required=True,
        )
        for task in self._tasks.values():
            task.grammar().attach(sub)
        add_help_applet(parser, sub)

    def execute(self, matches: argparse.Namespace) -> TaskAction:
        self._seal()
        name = getattr(matches, self._dest)
        _log_debug(f"{self.name}: dispatch {name}")
        return self._tasks[name].execute(matches)

    def suggest(self, tokens: Sequence[str]) -> str | None:
        self._seal()
        if not tokens:
            return None
        head, rest = tokens[0], list(tokens[1:])

        task = self._tasks.get(head)
        if task is not None:
            completed = task.suggest(rest)
            if completed is None:
                return None
            return f"{head} {completed}"

        if head == HELP_APPLET and len(rest) == 1:
            return f"{HELP_APPLET} {complete(self._tasks, rest[0])}"

        ranked = complete([*self._tasks, HELP_APPLET], head)
        return " ".join([ranked, *rest])

    # -- line runner --

    def parser(self) -> GrammarParser:
        """Build the merged root parser.

        Multicall mode: the first token is the applet name, there is no
        usage line and no ``-h`` (the ``help`` applet covers it).
        """
        return self.grammar().parser(usage=argparse.SUPPRESS, add_help=False)

    def parse(self, line: str) -> argparse.Namespace | None:
        """Parse *line* against the merged grammar.

        Returns None for a blank line.

        Raises:
            QuotingError: unbalanced quotes or a dangling escape.
            GrammarError: argparse rejected the tokens, or help was requested
                (the error message is the help text).
        """
        try:
            args = shlex.split(line)
        except ValueError:
            raise QuotingError() from None
        if not args:
            return None

        self._seal()
        try:
            matches = self.parser().parse_args(args)
            help_text = requested_help(matches)
        except AppletError:
            _log_debug(f"{self.name}: rejected {line!r}")
            raise
        if help_text is not None:
            raise GrammarError(help_text)
        return matches

    def run(self, line: str) -> TaskAction:
        """Parse and execute one line; a blank line is a no-op ``CONTINUE``."""
        matches = self.parse(line)
        if matches is None:
            return TaskAction.CONTINUE
        return self.execute(matches)

    def run_batch(self, text: str) -> TaskAction:
        """Run every line and ``;``-separated fragment of *text* in order.

        The first error propagates and the remaining fragments are skipped.
        Actions do not stop the batch; the first ``BREAK`` or ``EXIT`` seen
        is returned, otherwise ``CONTINUE``.
        """
        result = TaskAction.CONTINUE
        for line in text.split("\n"):
            for fragment in line.strip().split(";"):
                action = self.run(fragment.strip())
                if result is TaskAction.CONTINUE:
                    result = action
        return result

    # -- interactive --

    def run_interactive_with(
        self, configure: Callable[[SessionBuilder], SessionBuilder]
    ) -> TaskAction:
        """Run a read-eval loop configured by *configure*.

        *configure* receives a ``SessionBuilder`` preloaded with the defaults
        and the ``session`` config section, and returns the builder to use.

        Raises:
            EditingEngineError: the terminal failed; the loop is over.
        """
        from ...ui.session import SessionBuilder

        self._seal()
        return configure(SessionBuilder(self)).build().run()

    def run_interactive(self) -> TaskAction:
        return self.run_interactive_with(lambda builder: builder)
