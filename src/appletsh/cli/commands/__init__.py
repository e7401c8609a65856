# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Built-in applets.

Each applet is a class implementing the ``Task`` protocol: ``grammar()``
describes its arguments, ``execute(matches)`` runs it and returns a
``TaskAction``, ``suggest(tokens)`` completes the words after its name.
"""

from .builtins import Echo, Exit, Quit

__all__ = ["Echo", "Exit", "Quit", "builtin_tasks"]


def builtin_tasks() -> list:
    """Return fresh instances of every built-in applet."""
    return [Echo(), Quit(), Exit()]
