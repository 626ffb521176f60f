# debug.py
# --- Step-by-step trace shared by the parsing stages ---

import logging
from typing import Optional

logger = logging.getLogger("nlp")

_DEBUG = False


def set_debug(enabled: bool) -> None:
    """Toggle step-by-step debug output for the parser modules."""
    global _DEBUG
    _DEBUG = enabled
    logger.setLevel(logging.DEBUG if enabled else logging.NOTSET)


def debug(step: str, detail: Optional[str] = None) -> None:
    """Emit a debug line when debugging is enabled."""
    if not _DEBUG:
        return
    if detail:
        logger.debug("[parser] %s: %s", step, detail)
    else:
        logger.debug("[parser] %s", step)
