# heuristics.py
# --- Line classifiers and static vocabularies shared by every extractor ---

import re
from typing import Optional

# ---- Static configuration ----

# Letter-spaced lines that spell one of these stay spaced ("U S A").
DESPACE_ACRONYMS = frozenset({"USA", "UK", "CEO", "CFO", "VP", "HR", "IT", "UI", "UX", "API"})

# Description text matching these is dropped from experience bullets.
EXPERIENCE_NOISE_PHRASES = ("as the web designer",)

# Any line containing these is accepted as the headline title.
TITLE_OVERRIDE_PHRASES = ("web designer", "web developer")

KNOWN_SECTION_HEADERS = frozenset({
    "profile", "summary", "career objective", "professional summary",
    "employment history", "work experience", "experience", "professional experience",
    "education", "academic background", "qualifications",
    "skills", "technical skills", "core competencies", "key skills",
    "projects", "achievements", "certifications", "courses", "training",
    "hobbies", "interests", "languages", "references", "details",
})

JOB_TITLE_WORDS = (
    "developer", "engineer", "manager", "analyst", "specialist", "coordinator",
    "director", "consultant", "architect", "designer", "administrator", "controller",
    "technician", "officer", "associate", "executive", "lead", "head", "supervisor",
    "assistant", "intern", "trainee", "apprentice", "clerk", "operator", "warehouse",
    "inventory", "laboratory", "lab", "sales", "customer service", "support",
)

ROLE_KEYWORDS = {
    "engineer", "developer", "manager", "intern", "consultant", "analyst", "lead",
    "specialist", "architect", "director", "coordinator", "associate", "scientist",
    "administrator", "designer", "officer", "supervisor", "trainer", "head",
    "assistant", "technician", "executive", "clerk", "operator", "representative",
}

INSTITUTION_WORDS = ("university", "college", "school", "institute", "academy")

# ---- Regex tables ----

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(
    r"(?<!\d)(?:\+\d{1,3}[\s-]?)?\(?\d{3}\)?[\s.-]?\d{3,4}[\s.-]?\d{4}(?!\d)"
)
_DIGIT_RUN_RE = re.compile(r"\d{8,}")
_HEADER_CAPS_RE = re.compile(r"^[A-Z][A-Z\s&]*$")
_NUMBERED_RE = re.compile(r"^\d+\.")
_BULLET_PREFIX_RE = re.compile(r"^(?:(?:[•\-*°·]|\d+\.)\s*)+")
_AT_RE = re.compile(r"\sat\s", re.IGNORECASE)

BULLET_CHARS = ("•", "-", "*", "°", "·")

MONTH_PATTERN = (
    r"Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?|"
    r"Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?"
)
_MONTH_YEAR = rf"\b(?:{MONTH_PATTERN})\.?,?\s*\d{{4}}"
_RANGE_SEP = r"\s*(?:-|–|—|to)\s*"
_OPEN_END = r"(?:present|current|now)"

# Longest forms first so a range is returned whole rather than its start.
DATE_PATTERNS = (
    re.compile(rf"{_MONTH_YEAR}{_RANGE_SEP}(?:{_OPEN_END}|{_MONTH_YEAR}|\d{{4}})\b", re.IGNORECASE),
    re.compile(rf"\b\d{{4}}{_RANGE_SEP}(?:{_OPEN_END}|\d{{4}})\b", re.IGNORECASE),
    re.compile(rf"\b\d{{1,2}}/\d{{4}}{_RANGE_SEP}(?:{_OPEN_END}|\d{{1,2}}/\d{{4}})\b", re.IGNORECASE),
    re.compile(rf"{_MONTH_YEAR}\b", re.IGNORECASE),
)
YEAR_ONLY_RE = re.compile(r"^(?:19|20)\d{2}$")

DEGREE_RE = re.compile(
    r"\b(?:bachelor|master)(?:'?s)?\b"
    r"|\b(?:doctorate|diploma|degree|mba|bba|bca|mca|ssc|hsc)"
    r"|\b(?:ph\.?\s?d|b\.?\s?tech|m\.?\s?tech|b\.?\s?sc|m\.?\s?sc|b\.?\s?com|m\.?\s?com)"
    r"|\b[bm]\.\s?[aes]\b\.?"
    r"|\bclass\s+x"
    r"|\b(?:higher|senior)\s+secondary"
    r"|\bhigh\s+school",
    re.IGNORECASE,
)
PERCENTAGE_RE = re.compile(
    r"\d+(?:\.\d+)?\s*%"
    r"|\d+\.\d+\s*/\s*\d+"
    r"|\b(?:cgpa|gpa|percentage)\s*[:\-]?\s*\d",
    re.IGNORECASE,
)


# ---- Contact primitives ----

def find_email(line: str) -> Optional[str]:
    match = EMAIL_RE.search(line)
    return match.group(0) if match else None


def find_phone(line: str) -> Optional[str]:
    """Return the first phone-shaped match with 8-15 digits."""
    for match in PHONE_RE.finditer(line):
        digits = sum(ch.isdigit() for ch in match.group(0))
        if 8 <= digits <= 15:
            return match.group(0).strip()
    return None


def has_email(line: str) -> bool:
    return EMAIL_RE.search(line) is not None


def has_phone(line: str) -> bool:
    return find_phone(line) is not None or _DIGIT_RUN_RE.search(line) is not None


# ---- Line classifiers ----

def word_count(line: str) -> int:
    return len(line.split())


def is_section_header(line: str) -> bool:
    stripped = line.strip()
    if len(stripped) < 50 and _HEADER_CAPS_RE.match(stripped):
        return True
    if stripped.endswith(":") and len(stripped) < 50:
        return True
    return stripped.lower() in KNOWN_SECTION_HEADERS


def is_bullet(line: str) -> bool:
    return line.startswith(BULLET_CHARS) or _NUMBERED_RE.match(line) is not None


def strip_bullet(line: str) -> str:
    return _BULLET_PREFIX_RE.sub("", line).strip()


def looks_like_job_title(line: str) -> bool:
    if len(line) >= 120:
        return False
    if has_email(line) or has_phone(line):
        return False
    lower = line.lower()
    if any(word in lower for word in JOB_TITLE_WORDS):
        return True
    return _AT_RE.search(line) is not None


def has_role_keyword(line: str) -> bool:
    tokens = {re.sub(r"[^a-z]", "", word.lower()) for word in line.split()}
    tokens.discard("")
    return bool(tokens & ROLE_KEYWORDS)


def extract_date(line: str) -> str:
    """Return the first date or date range found in the line, or ''."""
    for pattern in DATE_PATTERNS:
        match = pattern.search(line)
        if match:
            return match.group(0).strip()
    return ""


def looks_like_date(line: str) -> bool:
    return extract_date(line) != ""


def looks_like_year(line: str) -> bool:
    return YEAR_ONLY_RE.match(line.strip()) is not None


def looks_like_degree(line: str) -> bool:
    return DEGREE_RE.search(line) is not None


def looks_like_institution(line: str) -> bool:
    lower = line.lower()
    return any(word in lower for word in INSTITUTION_WORDS)


def looks_like_percentage(line: str) -> bool:
    return PERCENTAGE_RE.search(line) is not None


def split_sentences(line: str, min_length: int = 15) -> list:
    """Split on '. ' and keep sentences of at least ``min_length`` chars.

    Each kept sentence ends with a period.
    """
    sentences = []
    for part in line.split(". "):
        part = part.strip()
        if len(part) < min_length:
            continue
        if not part.endswith("."):
            part += "."
        sentences.append(part)
    return sentences
