# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""The ``Task`` protocol implemented by every applet.

A task contributes three things to the dispatcher: its grammar, what to do
with the parsed arguments, and how to complete a partial command line that
starts with its name.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .grammar import Grammar


class TaskAction(Enum):
    """What the driving loop does after a task ran."""

    CONTINUE = "continue"
    BREAK = "break"
    EXIT = "exit"


class Task(Protocol):
    """Interface for applets."""

    def grammar(self) -> Grammar:
        """Return the applet's grammar.  Called on every parse."""
        ...

    def execute(self, matches: argparse.Namespace) -> TaskAction:
        """Run the applet with parsed arguments."""
        ...

    def suggest(self, tokens: Sequence[str]) -> str | None:
        """Complete *tokens*, the words typed after the applet name.

        Return the replacement for those words, or None to leave the line
        alone.
        """
        ...
