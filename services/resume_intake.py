"""Caller-side wrapper around the resume parser.

Screens text before it reaches the parser (extraction sentinels, too
little text) and turns any failure into a status the UI can fall back on
with manual entry.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from data_loader import PDF_CONTENT_NEEDS_MANUAL_INPUT, is_sentinel
from nlp.parser import parse_resume_text
from services.settings import min_text_length

logger = logging.getLogger(__name__)

STATUS_PARSED = "parsed"
STATUS_MANUAL_INPUT = "manual_input"
STATUS_UNSUPPORTED = "unsupported"
STATUS_TOO_SHORT = "too_short"
STATUS_FAILED = "failed"

_MESSAGES = {
    STATUS_MANUAL_INPUT: "Text could not be extracted from this file. Paste the resume text instead.",
    STATUS_UNSUPPORTED: "Unsupported file type. Upload a .txt file or paste the resume text.",
    STATUS_TOO_SHORT: "Not enough text to parse. Paste the full resume text.",
    STATUS_FAILED: "The resume could not be parsed. Please fill in the form manually.",
}


def _result(status: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {"status": status, "message": _MESSAGES.get(status, ""), "data": data}


def intake_resume_text(text: Optional[str], *, min_length: Optional[int] = None) -> Dict[str, Any]:
    """Return ``{"status", "message", "data"}``; ``data`` is the parse result when parsed."""

    text = text or ""
    if is_sentinel(text):
        status = STATUS_MANUAL_INPUT if text == PDF_CONTENT_NEEDS_MANUAL_INPUT else STATUS_UNSUPPORTED
        return _result(status)

    required = min_text_length() if min_length is None else min_length
    if len(text.strip()) < required:
        logger.info("resume text too short: %d < %d chars", len(text.strip()), required)
        return _result(STATUS_TOO_SHORT)

    try:
        data = parse_resume_text(text)
    except Exception as err:
        logger.exception("resume parsing failed: %s", err)
        return _result(STATUS_FAILED)
    return _result(STATUS_PARSED, data)


__all__ = [
    "STATUS_PARSED",
    "STATUS_MANUAL_INPUT",
    "STATUS_UNSUPPORTED",
    "STATUS_TOO_SHORT",
    "STATUS_FAILED",
    "intake_resume_text",
]
