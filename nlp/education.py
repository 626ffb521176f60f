# education.py
# --- Education section -> degree entries ---

from typing import Any, Dict, List, Optional

from nlp.debug import debug
from nlp.heuristics import (
    PERCENTAGE_RE,
    extract_date,
    is_section_header,
    looks_like_date,
    looks_like_degree,
    looks_like_institution,
    looks_like_percentage,
    looks_like_year,
    strip_bullet,
)
from services.resume_schema import build_education_entry, new_entry_id

EDUCATION_HEADER_WORDS = ("education", "academic")
EXIT_HEADER_WORDS = ("achievement", "skill", "experience", "project", "certification", "training")
EXIT_HEADER_EXACT = {"details", "hobbies", "languages", "references"}
LOOKAHEAD_LINES = 4


def _is_education_header(line: str) -> bool:
    lower = line.lower()
    return is_section_header(line) and any(word in lower for word in EDUCATION_HEADER_WORDS)


def _is_exit_header(line: str) -> bool:
    if not is_section_header(line):
        return False
    lower = line.lower().strip()
    if "education" in lower or "course" in lower:
        return False
    if lower.rstrip(":") in EXIT_HEADER_EXACT:
        return True
    return any(word in lower for word in EXIT_HEADER_WORDS)


def _year_text(line: str) -> str:
    if looks_like_year(line):
        return line.strip()
    return extract_date(line)


def _gpa_text(line: str) -> str:
    return line.strip() if PERCENTAGE_RE.search(line) else ""


def _new_entry(line: str) -> Dict[str, str]:
    """Open an entry from a degree- or institution-like line."""
    text = strip_bullet(line)
    entry = {"degree": "", "institution": "", "year": _year_text(text), "gpa": _gpa_text(text)}
    if looks_like_degree(text):
        degree, sep, rest = text.partition(",")
        if sep and looks_like_institution(rest) and not looks_like_institution(degree):
            entry["degree"] = degree.strip()
            entry["institution"] = rest.strip()
        else:
            entry["degree"] = text
    else:
        entry["institution"] = text
    return entry


def _fill(entry: Dict[str, str], line: str) -> bool:
    """Assign a year, GPA or institution line to the open entry."""
    if not entry["year"] and (looks_like_date(line) or looks_like_year(line)):
        entry["year"] = _year_text(line)
        return True
    if not entry["gpa"] and looks_like_percentage(line):
        entry["gpa"] = _gpa_text(line)
        return True
    return False


def extract_education(lines: List[str]) -> List[Dict[str, Any]]:
    items: List[Dict[str, Any]] = []
    entry: Optional[Dict[str, str]] = None
    inside = False

    def flush() -> None:
        nonlocal entry
        if entry and (entry["degree"] or entry["institution"]):
            items.append(build_education_entry(entry_id=new_entry_id(len(items)), **entry))
            debug("education_entry", f"{entry['degree']!r} @ {entry['institution']!r} ({entry['year']!r})")
        entry = None

    i = 0
    while i < len(lines):
        line = lines[i]

        if not inside:
            if _is_education_header(line):
                inside = True
                debug("education_section", line)
            i += 1
            continue

        if _is_exit_header(line):
            debug("education_exit", line)
            break

        starts_entry = looks_like_degree(line) or looks_like_institution(line)

        if starts_entry and entry is not None:
            # next entry begins: close this one and look at the line again
            flush()
            continue

        if starts_entry:
            entry = _new_entry(line)
            last = i
            for j in range(i + 1, min(i + 1 + LOOKAHEAD_LINES, len(lines))):
                ahead = lines[j]
                if _is_exit_header(ahead) or _is_education_header(ahead):
                    break
                if looks_like_degree(ahead):
                    if entry["degree"]:
                        break
                    entry["degree"] = strip_bullet(ahead)
                elif looks_like_institution(ahead):
                    if entry["institution"]:
                        break
                    entry["institution"] = strip_bullet(ahead)
                else:
                    _fill(entry, ahead)
                last = j
            i = last + 1
            continue

        if entry is not None:
            _fill(entry, line)
        i += 1

    flush()
    debug("extract_education", f"found {len(items)}")
    return items
