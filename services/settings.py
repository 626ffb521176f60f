"""Environment-driven settings for the parser callers.

Values come from the process environment; a ``.env`` file at the
repository root is loaded once on first access without overriding
variables that are already set.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_PATH = Path(__file__).resolve().parent.parent / ".env"

DEFAULT_MIN_TEXT_LENGTH = 100

_ENV_LOADED = False


def _load_local_env() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    if ENV_PATH.exists():
        for raw_line in ENV_PATH.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key.strip(), value.strip())
    _ENV_LOADED = True


def _env_flag(name: str, default: bool = False) -> bool:
    _load_local_env()
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    _load_local_env()
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %s", name, value, default)
        return default


def parser_debug_enabled() -> bool:
    return _env_flag("CVFORGE_PARSER_DEBUG")


def min_text_length() -> int:
    return max(0, _env_int("CVFORGE_MIN_TEXT_LENGTH", DEFAULT_MIN_TEXT_LENGTH))
