"""Utility functions for logging."""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def _config_debug() -> bool:
    """The ``debug`` key of the global config, read once per process."""
    try:
        from ..core.config import load_global_config

        return bool(load_global_config().get("debug", False))
    except Exception:
        return False


def debug_enabled() -> bool:
    """Return True when debug logging was requested.

    ``APPLETSH_DEBUG`` wins when set; otherwise the ``debug`` key of the
    global config decides.  The config is only read on the first call;
    ``_config_debug.cache_clear()`` forgets it.
    """
    env = os.environ.get("APPLETSH_DEBUG")
    if env is not None:
        return env not in ("", "0")
    return _config_debug()


def _log_debug(message: str) -> None:
    """Append a simple debug line to the appletsh log.

    This is intentionally very small and best-effort so it never interferes
    with the interactive loop or a batch run.  Nothing is written unless
    ``debug_enabled()`` says so.

    Writes timestamped lines to ``state_root()/appletsh.log``. Fully
    exception-safe: any IO error is silently ignored so this function never
    raises or affects callers.
    """
    try:
        if not debug_enabled():
            return

        import time

        from ..core.paths import state_root

        log_path = state_root() / "appletsh.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
