# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Error kinds surfaced by the dispatcher and the interactive session.

``QuotingError`` and ``GrammarError`` describe a bad input line; callers
print them and carry on.  ``EditingEngineError`` means the terminal side
gave up and ends the interactive call.
"""


class AppletError(Exception):
    """Base class for every error raised by appletsh."""


class QuotingError(AppletError):
    """The line could not be split into shell-style tokens."""

    def __init__(self, message: str = "error: Invalid quoting") -> None:
        super().__init__(message)


class GrammarError(AppletError):
    """The argument parser rejected the tokens, or help was requested."""


class EditingEngineError(AppletError):
    """The line-editing engine failed irrecoverably."""
