"""Shared helpers for constructing parsed-resume records.

Every entity is a plain dictionary so callers can serialise it straight to
JSON or merge it into an editable resume document.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Iterable, List, Optional

PROFICIENCY_LEVELS = ("Beginner", "Intermediate", "Advanced", "Expert")
DEFAULT_PROFICIENCY = "Intermediate"
DEFAULT_SUMMARY = "Professional with diverse experience."


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def _text_list(values: Optional[Iterable[Any]]) -> List[str]:
    if not values:
        return []
    return [_coerce_text(value) for value in values]


def new_entry_id(position: int = 0) -> int:
    """Millisecond timestamp offset by list position; only used as a UI key."""
    return int(time.time() * 1000) + position


def build_personal_info(
    *,
    name: str = "",
    title: str = "",
    email: str = "",
    phone: str = "",
    summary: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    lines = [line for line in _text_list(summary) if line]
    return {
        "name": _coerce_text(name),
        "title": _coerce_text(title),
        "email": _coerce_text(email),
        "phone": _coerce_text(phone),
        "summary": lines or [DEFAULT_SUMMARY],
    }


def build_experience_entry(
    *,
    entry_id: int,
    title: str = "",
    company: str = "",
    period: str = "",
    description: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    bullets = _text_list(description)
    return {
        "id": int(entry_id),
        "title": _coerce_text(title),
        "company": _coerce_text(company),
        "period": _coerce_text(period),
        "description": bullets or [""],
    }


def build_education_entry(
    *,
    entry_id: int,
    degree: str = "",
    institution: str = "",
    year: str = "",
    gpa: str = "",
) -> Dict[str, Any]:
    return {
        "id": int(entry_id),
        "degree": _coerce_text(degree),
        "institution": _coerce_text(institution),
        "year": _coerce_text(year),
        "gpa": _coerce_text(gpa),
    }


def build_skill_entry(name: str, proficiency: str = DEFAULT_PROFICIENCY) -> Dict[str, str]:
    level = _coerce_text(proficiency) or DEFAULT_PROFICIENCY
    if level not in PROFICIENCY_LEVELS:
        raise ValueError(f"Unknown proficiency level: {proficiency!r}")
    return {"name": _coerce_text(name), "proficiency": level}


# ---- Placeholders ----

def default_experiences() -> List[Dict[str, Any]]:
    return [build_experience_entry(entry_id=new_entry_id())]


def default_education() -> List[Dict[str, Any]]:
    return [build_education_entry(entry_id=new_entry_id())]


def default_skills() -> List[Dict[str, str]]:
    return [build_skill_entry("")]


def build_parse_result(
    *,
    personal_info: Optional[Dict[str, Any]] = None,
    experiences: Optional[List[Dict[str, Any]]] = None,
    education: Optional[List[Dict[str, Any]]] = None,
    skills: Optional[List[Dict[str, str]]] = None,
    projects: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Assemble the top-level result, filling any empty list with its placeholder."""

    return {
        "personal_info": personal_info or build_personal_info(),
        "experiences": experiences or default_experiences(),
        "education": education or default_education(),
        "skills": skills or default_skills(),
        "projects": list(projects or []),
    }


def default_parse_result() -> Dict[str, Any]:
    return build_parse_result()


__all__ = [
    "PROFICIENCY_LEVELS",
    "DEFAULT_PROFICIENCY",
    "DEFAULT_SUMMARY",
    "new_entry_id",
    "build_personal_info",
    "build_experience_entry",
    "build_education_entry",
    "build_skill_entry",
    "build_parse_result",
    "default_experiences",
    "default_education",
    "default_skills",
    "default_parse_result",
]
