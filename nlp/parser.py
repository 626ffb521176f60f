# parser.py
# --- Structured resume data from pasted or plain-text resume content ---
#
# Every stage reads the same normalized line list; none feeds another.

import logging
from typing import Any, Dict, List

from nlp.debug import debug, set_debug
from nlp.education import extract_education
from nlp.experience import extract_experience
from nlp.personal_info import extract_personal_info
from nlp.skills import extract_skills
from nlp.text_normalizer import normalize_lines
from services.resume_schema import build_parse_result, default_parse_result

logger = logging.getLogger(__name__)

__all__ = ["parse_resume_text", "extract_projects", "set_debug"]


def extract_projects(lines: List[str]) -> List[Dict[str, Any]]:
    """Free-text project entries are not parsed; always an empty list."""
    return []


def parse_resume_text(raw_text: str) -> Dict[str, Any]:
    """Parse resume text into personal info, experience, education, skills and projects.

    Never raises. Any unexpected failure is logged and the full
    placeholder result is returned instead, so "nothing found" and
    "parse failed" look the same to callers.
    """
    debug("parse", "start")
    try:
        lines = normalize_lines(raw_text or "")
        result = build_parse_result(
            personal_info=extract_personal_info(lines),
            experiences=extract_experience(lines),
            education=extract_education(lines),
            skills=extract_skills(lines),
            projects=extract_projects(lines),
        )
    except Exception as err:
        logger.exception("[parser] parse failed, returning defaults: %s", err)
        return default_parse_result()
    debug("parse", "complete")
    return result
