import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import APP_NAME, config_root

# ---------- Global config file ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If APPLETSH_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) config_root()/config.yml
        2) /etc/appletsh/config.yml
    """
    env_file = os.environ.get("APPLETSH_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = config_root() / "config.yml"
    etc_cfg = Path("/etc") / APP_NAME / "config.yml"
    return [user_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (first existing search path wins).

    An explicit APPLETSH_CONFIG_FILE is returned even if missing so that
    the intent stays visible.  If nothing exists, the last candidate is
    returned.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        return {}
    return data


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote
    ``session: "oops"``), returns ``{}`` to avoid ``AttributeError`` in
    callers that expect ``.get()``.
    """
    cfg = load_global_config()
    value = cfg.get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


# ---------- Interactive session ----------

DEFAULT_HISTORY_SIZE = 3


@dataclass(frozen=True)
class SessionSettings:
    """Prompt settings read from the ``session`` section.

    ``None`` means "not configured"; the session builder keeps its own
    default in that case.
    """

    label: str | None = None
    label_color: str | None = None
    history_size: int | None = None


def get_session_settings() -> SessionSettings:
    """Read the ``session`` section, ignoring values of the wrong type."""
    try:
        section = get_global_section("session")
    except (OSError, yaml.YAMLError):
        return SessionSettings()

    label = section.get("label")
    label_color = section.get("label_color")
    history_size = section.get("history_size")
    if isinstance(history_size, bool) or not isinstance(history_size, int) or history_size < 0:
        history_size = None
    return SessionSettings(
        label=label if isinstance(label, str) else None,
        label_color=label_color if isinstance(label_color, str) else None,
        history_size=history_size,
    )
