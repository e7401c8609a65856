# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Interactive read-eval loop on top of prompt_toolkit.

``SessionBuilder`` collects the prompt settings (label, label color,
history size) and builds an ``InteractiveSession`` whose key bindings are
wired to a dispatcher:

- Tab asks the dispatcher to complete the current line and replaces the
  buffer with the suggestion, if any.
- Ctrl-C clears the line and submits it, which the loop treats as a blank
  line instead of terminating.

The loop reads one line at a time, runs it, prints rejected lines and stops
on the first ``BREAK`` or ``EXIT``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum, auto
from typing import TYPE_CHECKING

from prompt_toolkit import PromptSession
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import History
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from ..lib._util.logging_utils import _log_debug
from ..lib.core.config import DEFAULT_HISTORY_SIZE, get_session_settings
from ..lib.core.errors import EditingEngineError, GrammarError, QuotingError
from ..lib.core.task import Task, TaskAction

if TYPE_CHECKING:
    from ..lib.core.dispatcher import Dispatcher


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------


class BoundedHistory(History):
    """In-memory history keeping only the *limit* most recent lines."""

    def __init__(self, limit: int) -> None:
        super().__init__()
        self.limit = limit
        self._storage: deque[str] = deque(maxlen=limit)

    def load_history_strings(self) -> Iterable[str]:
        # Newest first, as prompt_toolkit expects.
        yield from reversed(self._storage)

    def store_string(self, string: str) -> None:
        self._storage.append(string)

    def append_string(self, string: str) -> None:
        super().append_string(string)
        del self._loaded_strings[self.limit :]


# ---------------------------------------------------------------------------
# Key binding handlers
# ---------------------------------------------------------------------------


def complete_buffer(task: Task, buffer: Buffer) -> None:
    """Replace *buffer* with the completion *task* suggests for it.

    Completion is best-effort: a failing ``suggest`` leaves the buffer as
    it was.
    """
    tokens = buffer.text.split()
    try:
        suggestion = task.suggest(tokens)
    except Exception as e:
        _log_debug(f"completion of {tokens!r} failed: {e!r}")
        return
    if suggestion is not None:
        buffer.document = Document(suggestion)


def cancel_buffer(buffer: Buffer) -> None:
    """Discard the current line and submit the now empty buffer."""
    buffer.reset()
    buffer.validate_and_handle()


def build_key_bindings(task: Task) -> KeyBindings:
    kb = KeyBindings()

    @kb.add("tab")
    def _complete(event: KeyPressEvent) -> None:
        complete_buffer(task, event.current_buffer)

    @kb.add("c-c")
    def _cancel(event: KeyPressEvent) -> None:
        cancel_buffer(event.current_buffer)

    return kb


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class SessionState(Enum):
    """States of the read-eval loop."""

    READING = auto()
    DISPATCHING = auto()
    REPORTING = auto()
    DONE = auto()


class InteractiveSession:
    """Read-eval loop driving a dispatcher.

    Args:
        dispatcher: Runs each submitted line.
        prompt: The prompt_toolkit session lines are read from.
    """

    def __init__(self, dispatcher: Dispatcher, prompt: PromptSession) -> None:
        self.dispatcher = dispatcher
        self.prompt = prompt
        self.state = SessionState.READING

    def read_line(self) -> str:
        """Block until a line is submitted.

        Raises:
            EOFError: end of input (Ctrl-D on an empty line).
            EditingEngineError: the terminal failed.
        """
        try:
            return self.prompt.prompt()
        except (OSError, RuntimeError) as e:
            _log_debug(f"{self.dispatcher.name}: editing engine failed: {e!r}")
            raise EditingEngineError(str(e) or type(e).__name__) from e

    def dispatch(self, line: str) -> TaskAction:
        """Run *line*, printing a rejected line and treating it as ``CONTINUE``."""
        try:
            return self.dispatcher.run(line)
        except (QuotingError, GrammarError) as e:
            if str(e):
                print(e)
            return TaskAction.CONTINUE

    def run(self) -> TaskAction:
        """Loop until an applet returns ``BREAK`` or ``EXIT``; return it.

        End of input stops the loop with ``BREAK``.

        Raises:
            EditingEngineError: the terminal failed.
        """
        _log_debug(f"{self.dispatcher.name}: session started")
        action = TaskAction.CONTINUE
        self.state = SessionState.READING
        while self.state is not SessionState.DONE:
            try:
                line = self.read_line()
            except EOFError:
                action = TaskAction.BREAK
                self.state = SessionState.DONE
                break
            self.state = SessionState.DISPATCHING
            action = self.dispatch(line)
            self.state = SessionState.REPORTING
            if action is TaskAction.CONTINUE:
                self.state = SessionState.READING
            else:
                self.state = SessionState.DONE
        _log_debug(f"{self.dispatcher.name}: session ended with {action.name}")
        return action


class SessionBuilder:
    """Chainable configuration for ``InteractiveSession``.

    Defaults are the label ``"<root>> "``, the terminal's default color and
    three history entries; the ``session`` section of the global config
    overrides them, and the builder methods override both.
    """

    def __init__(self, dispatcher: Dispatcher) -> None:
        self.dispatcher = dispatcher
        settings = get_session_settings()
        self._label = settings.label if settings.label is not None else f"{dispatcher.name}> "
        self._label_color = settings.label_color or ""
        self._history_size = (
            settings.history_size if settings.history_size is not None else DEFAULT_HISTORY_SIZE
        )
        self._input: Input | None = None
        self._output: Output | None = None

    def label(self, text: str) -> SessionBuilder:
        self._label = text
        return self

    def label_color(self, color: str) -> SessionBuilder:
        """Set the label style, any prompt_toolkit style string (``"ansired"``)."""
        self._label_color = color
        return self

    def limit_history_size(self, size: int) -> SessionBuilder:
        if size < 0:
            raise ValueError("history size must not be negative")
        self._history_size = size
        return self

    def input(self, value: Input) -> SessionBuilder:
        self._input = value
        return self

    def output(self, value: Output) -> SessionBuilder:
        self._output = value
        return self

    def build(self) -> InteractiveSession:
        """Create the prompt session.

        Raises:
            EditingEngineError: prompt_toolkit could not attach to the terminal,
                or the label color is not a valid style.
        """
        try:
            style = Style.from_dict({"label": self._label_color}) if self._label_color else None
            prompt: PromptSession[str] = PromptSession(
                message=FormattedText([("class:label", self._label)]),
                history=BoundedHistory(self._history_size),
                key_bindings=build_key_bindings(self.dispatcher),
                style=style,
                input=self._input,
                output=self._output,
            )
        except (OSError, ValueError) as e:
            raise EditingEngineError(str(e) or type(e).__name__) from e
        return InteractiveSession(self.dispatcher, prompt)
