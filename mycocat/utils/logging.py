"""Root logger setup shared by the CLI and the web runtime.

``MYCOCAT_LOG_LEVEL`` (a level name such as ``warning`` or a number) wins over
everything else; a truthy ``MYCOCAT_DEBUG`` forces DEBUG when no level is set.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def _level_from_name(name: str) -> Optional[int]:
    token = name.strip()
    if token.isdigit():
        return int(token)
    level = logging.getLevelName(token.upper())
    return level if isinstance(level, int) else None


def env_level() -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    raw = os.environ.get("MYCOCAT_LOG_LEVEL", "")
    if raw.strip():
        return _level_from_name(raw) or logging.INFO
    if os.environ.get("MYCOCAT_DEBUG", "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Install the console handler once and set the root level; returns it."""
    if isinstance(default_level, str):
        default_level = _level_from_name(default_level) or logging.INFO
    level = env_level() or default_level

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)
    return level


def apply_preferences(debug_enabled: bool) -> int:
    """Apply the debug-logging setting unless the environment pins a level."""
    level = env_level()
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(level)
    return level
