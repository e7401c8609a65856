"""appletsh package.

Busybox-style multicall shells: many applets, each with its own argparse
grammar and Tab completion, behind one dispatcher that runs lines in batch
or in an interactive prompt_toolkit loop.

Modules:
- appletsh.lib.core: Task protocol, grammars, dispatcher, config, paths
- appletsh.lib._util: Internal helpers (ANSI colors, debug logging)
- appletsh.ui: Interactive session (prompt_toolkit)
- appletsh.cli: ``appletsh`` entry point and built-in applets
"""

from .lib.core.dispatcher import Dispatcher
from .lib.core.errors import AppletError, EditingEngineError, GrammarError, QuotingError
from .lib.core.grammar import Grammar
from .lib.core.suggest import complete
from .lib.core.task import Task, TaskAction

__all__ = [
    "AppletError",
    "Dispatcher",
    "EditingEngineError",
    "Grammar",
    "GrammarError",
    "QuotingError",
    "Task",
    "TaskAction",
    "complete",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("appletsh")
except PackageNotFoundError:
    # Fallback for development mode when package is not installed
    __version__ = "unknown"
