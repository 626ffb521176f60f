# personal_info.py
# --- Name, headline title, contact details and summary from the top of a resume ---

import re
from typing import Any, Dict, List, Optional, Set

from nlp.debug import debug
from nlp.heuristics import (
    KNOWN_SECTION_HEADERS,
    TITLE_OVERRIDE_PHRASES,
    find_email,
    find_phone,
    has_email,
    has_phone,
    is_bullet,
    is_section_header,
    looks_like_job_title,
    split_sentences,
    strip_bullet,
    word_count,
)
from services.resume_schema import build_personal_info

NAME_SCAN_LINES = 10
TITLE_SCAN_LINES = 15
MAX_SUMMARY_LINES = 3

_NAME_RE = re.compile(r"^[A-Za-z\s.'-]+$")

NAME_STOP_WORDS = ("resume", "curriculum", "vitae")
LOCATION_WORDS = {
    "street", "st", "road", "rd", "avenue", "ave", "lane", "ln", "drive", "blvd",
    "boulevard", "highway", "sector", "block", "floor", "apartment", "apt", "suite",
    "nagar", "colony", "city", "state", "country", "district", "county", "province",
    "village", "town", "pin", "zip",
    "india", "usa", "canada", "australia", "england", "germany", "france", "singapore",
    "uae", "dubai", "london", "york", "california", "texas", "florida", "washington",
    "chicago", "boston", "seattle", "austin", "mumbai", "delhi", "bangalore", "bengaluru",
    "hyderabad", "chennai", "pune", "kolkata", "toronto", "sydney",
}
LOCATION_PHRASES = ("united states", "united kingdom", "new york", "san francisco", "los angeles", "tamil nadu")

SUMMARY_HEADER_PHRASES = ("career objective", "professional summary", "profile", "about me")
_SUMMARY_MENTIONS = ("objective", "summary", "profile")


def _mentions_location(line: str) -> bool:
    lower = line.lower()
    if any(phrase in lower for phrase in LOCATION_PHRASES):
        return True
    tokens = {re.sub(r"[^a-z]", "", w) for w in lower.split()}
    return bool(tokens & LOCATION_WORDS)


def looks_like_name(line: str) -> bool:
    words = line.split()
    if not 2 <= len(words) <= 4:
        return False
    if len(line) >= 50 or not _NAME_RE.match(line):
        return False
    if has_email(line) or has_phone(line):
        return False
    lower = line.lower()
    if any(stop in lower for stop in NAME_STOP_WORDS):
        return False
    if lower.strip() in KNOWN_SECTION_HEADERS:
        return False
    return not _mentions_location(line)


def extract_name(lines: List[str]) -> Optional[int]:
    """Return the index of the name line within the leading window."""
    for idx, line in enumerate(lines[:NAME_SCAN_LINES]):
        if looks_like_name(line):
            debug("extract_name", line)
            return idx
    debug("extract_name", "no match")
    return None


def extract_email(lines: List[str]) -> Optional[int]:
    for idx, line in enumerate(lines):
        if find_email(line):
            return idx
    return None


def extract_phone(lines: List[str]) -> Optional[int]:
    for idx, line in enumerate(lines):
        if find_phone(line):
            return idx
    return None


def extract_title(lines: List[str], skip: Set[int]) -> str:
    for idx, line in enumerate(lines[:TITLE_SCAN_LINES]):
        if idx in skip:
            continue
        lower = line.lower()
        if any(phrase in lower for phrase in TITLE_OVERRIDE_PHRASES):
            return line
        if looks_like_job_title(line) and len(line) < 80:
            return line
    return ""


def _is_summary_header(line: str) -> bool:
    lower = line.lower().strip()
    mentioned = any(phrase in lower for phrase in SUMMARY_HEADER_PHRASES) or lower == "summary"
    return mentioned and is_section_header(line)


def _starts_new_section(line: str) -> bool:
    if word_count(line) > 3:
        return False
    lower = line.lower().strip()
    if any(word in lower for word in _SUMMARY_MENTIONS):
        return False
    return (
        is_section_header(line)
        or line.isupper()
        or line.endswith(":")
        or lower.rstrip(":") in KNOWN_SECTION_HEADERS
    )


def extract_summary(lines: List[str]) -> List[str]:
    start = next((idx for idx, line in enumerate(lines) if _is_summary_header(line)), None)
    if start is None:
        debug("extract_summary", "no summary header")
        return []

    summary: List[str] = []
    for line in lines[start + 1:]:
        if len(summary) >= MAX_SUMMARY_LINES:
            break
        if _starts_new_section(line):
            break
        text = strip_bullet(line) if is_bullet(line) else line
        if len(text) <= 20 or is_section_header(text) or word_count(text) <= 3:
            continue
        sentences = split_sentences(text)
        if len(sentences) > 1:
            summary.extend(sentences)
        else:
            summary.append(text)
    debug("extract_summary", f"found {len(summary)} lines")
    return summary


def extract_personal_info(lines: List[str]) -> Dict[str, Any]:
    name_idx = extract_name(lines)
    email_idx = extract_email(lines)
    phone_idx = extract_phone(lines)

    name = lines[name_idx].title() if name_idx is not None else ""
    email = find_email(lines[email_idx]).lower() if email_idx is not None else ""
    phone = find_phone(lines[phone_idx]) if phone_idx is not None else ""

    skip = {idx for idx in (name_idx, email_idx, phone_idx) if idx is not None}
    title = extract_title(lines, skip)
    summary = extract_summary(lines)

    debug("extract_personal_info", f"name={name!r}, title={title!r}, email={email!r}, phone={phone!r}")
    return build_personal_info(
        name=name,
        title=title,
        email=email,
        phone=phone or "",
        summary=summary,
    )
