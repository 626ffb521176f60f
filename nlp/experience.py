# experience.py
# --- Work-experience section -> job entries ---
#
# Rules are tried top to bottom for every line inside the section. The
# order is load-bearing: compact "Title, Company" lines first, then date
# separators, then standalone and generic title lines, then description
# text for whichever entry is open.

import re
from typing import Any, Dict, List, Optional

from nlp.debug import debug
from nlp.heuristics import (
    EXPERIENCE_NOISE_PHRASES,
    has_role_keyword,
    is_bullet,
    is_section_header,
    looks_like_date,
    looks_like_job_title,
    split_sentences,
    strip_bullet,
    word_count,
)
from services.resume_schema import build_experience_entry, new_entry_id

EXPERIENCE_HEADER_WORDS = ("experience", "employment", "work history")
EXIT_HEADER_WORDS = ("education", "project", "certification", "skill", "achievement", "training", "course")
EXIT_HEADER_EXACT = {"details", "hobbies", "languages"}
LOOKAHEAD_EXIT_WORDS = ("education", "project", "skill")

_COMPACT_RE = re.compile(r"^([^,]+),\s*(.+)$")
_AT_COMPANY_RE = re.compile(r"\sat\s+[^,]+,", re.IGNORECASE)


def _is_noise(text: str) -> bool:
    lower = text.lower()
    return any(phrase in lower for phrase in EXPERIENCE_NOISE_PHRASES)


def _is_experience_header(line: str) -> bool:
    lower = line.lower()
    return is_section_header(line) and any(word in lower for word in EXPERIENCE_HEADER_WORDS)


def _is_exit_header(line: str) -> bool:
    if not is_section_header(line):
        return False
    lower = line.lower().strip()
    if lower.rstrip(":") in EXIT_HEADER_EXACT:
        return True
    return any(word in lower for word in EXIT_HEADER_WORDS)


def _ends_lookahead(line: str) -> bool:
    # all-caps company names also pass is_section_header
    return _is_exit_header(line) or _is_experience_header(line)


def _header_follows(lines: List[str], idx: int) -> bool:
    """True when one of the next two lines is an education/project/skill header."""
    for ahead in lines[idx + 1: idx + 3]:
        lower = ahead.lower()
        if is_section_header(ahead) and any(word in lower for word in LOOKAHEAD_EXIT_WORDS):
            return True
    return False


class _ExperienceState:
    """Entry under construction plus the bullets collected for it."""

    def __init__(self) -> None:
        self.entries: List[Dict[str, Any]] = []
        self.current: Optional[Dict[str, str]] = None
        self.bullets: List[str] = []

    def is_open(self) -> bool:
        return self.current is not None

    def is_pending(self) -> bool:
        """An open entry that so far only carries a period."""
        cur = self.current
        return cur is not None and not (cur["title"] or cur["company"] or self.bullets)

    def flush(self) -> None:
        cur = self.current
        if cur is not None and (cur["title"] or cur["company"] or self.bullets):
            self.entries.append(
                build_experience_entry(
                    entry_id=new_entry_id(len(self.entries)),
                    title=cur["title"],
                    company=cur["company"],
                    period=cur["period"],
                    description=self.bullets,
                )
            )
            debug("experience_entry", f"{cur['title']!r} @ {cur['company']!r} ({cur['period']!r}), bullets={len(self.bullets)}")
        self.current = None
        self.bullets = []

    def start(self, title: str = "", company: str = "", period: str = "") -> Dict[str, str]:
        """Open a new entry; a pending entry hands its period over."""
        if self.is_pending():
            period = period or self.current["period"]
            self.current = None
        else:
            self.flush()
        self.current = {"title": title, "company": company, "period": period}
        return self.current

    def add_bullet(self, text: str) -> None:
        self.bullets.append(text)


def _compact_match(line: str):
    if is_bullet(line) or len(line) <= 5 or word_count(line) > 6:
        return None
    return _COMPACT_RE.match(line)


def _is_standalone_position(line: str) -> bool:
    return (
        word_count(line) in (4, 5)
        and not looks_like_date(line)
        and not is_bullet(line)
        and 10 <= len(line) <= 80
        and (looks_like_job_title(line) or has_role_keyword(line))
    )


def _is_company_candidate(line: str) -> bool:
    return (
        2 <= word_count(line) <= 4
        and not looks_like_date(line)
        and not is_bullet(line)
        and not looks_like_job_title(line)
    )


def _is_dated_separator(line: str) -> bool:
    return word_count(line) <= 4 and looks_like_date(line)


def _collect_description(state: _ExperienceState, line: str) -> None:
    if is_bullet(line):
        text = strip_bullet(line)
        if len(text) > 10 and not _is_noise(text):
            state.add_bullet(text)
        return

    if (
        len(line) > 30
        and not looks_like_job_title(line)
        and not looks_like_date(line)
        and not is_section_header(line)
        and not _AT_COMPANY_RE.search(line)
        and word_count(line) > 4
        and not _is_noise(line)
    ):
        sentences = split_sentences(line)
        if len(sentences) > 1:
            for sentence in sentences:
                state.add_bullet(sentence)
        elif len(line) > 20:
            state.add_bullet(line)


def extract_experience(lines: List[str]) -> List[Dict[str, Any]]:
    state = _ExperienceState()
    inside = False
    i = 0

    while i < len(lines):
        line = lines[i]

        if not inside:
            if _is_experience_header(line):
                inside = True
                debug("experience_section", line)
            i += 1
            continue

        # 1. another section ends this one
        if _is_exit_header(line):
            debug("experience_exit", line)
            break

        if _is_experience_header(line):
            i += 1
            continue

        # 2. "Title, Company" on one line, period on one of the next two
        compact = _compact_match(line)
        if compact:
            entry = state.start(title=compact.group(1).strip(), company=compact.group(2).strip())
            for j in range(i + 1, min(i + 3, len(lines))):
                if looks_like_date(lines[j]):
                    if not entry["period"]:
                        entry["period"] = lines[j]
                    i = j
                    break
            i += 1
            continue

        # 3-4. a bare date while an entry is open
        if state.is_open() and _is_dated_separator(line):
            if _header_follows(lines, i):
                debug("experience_exit", f"trailing date {line!r}")
                break
            if state.is_pending() or not (state.current["period"] or state.bullets):
                state.current["period"] = line
            else:
                state.start(period=line)
            i += 1
            continue

        if not state.is_open() and _is_dated_separator(line) and not _header_follows(lines, i):
            # date before any role text: hold it for the entry that follows
            state.start(period=line)
            i += 1
            continue

        # 5. four or five word position line, company on one of the next two
        if (not state.is_open() or state.is_pending()) and _is_standalone_position(line):
            entry = state.start(title=line)
            for j in range(i + 1, min(i + 3, len(lines))):
                ahead = lines[j]
                if _ends_lookahead(ahead) or is_bullet(ahead) or looks_like_date(ahead):
                    break
                if _is_company_candidate(ahead):
                    entry["company"] = ahead
                    i = j
                    break
            i += 1
            continue

        # 6. any other title-like line, company and period from the next three
        if (
            (not state.is_open() or state.is_pending())
            and looks_like_job_title(line)
            and not is_bullet(line)
            and word_count(line) <= 5
        ):
            entry = state.start(title=line)
            for j in range(i + 1, min(i + 4, len(lines))):
                ahead = lines[j]
                if is_bullet(ahead) or _ends_lookahead(ahead):
                    break
                if looks_like_date(ahead):
                    if entry["period"]:
                        break
                    entry["period"] = ahead
                elif not entry["company"] and 3 <= len(ahead) <= 80:
                    entry["company"] = ahead
                else:
                    break
                i = j
            i += 1
            continue

        # 7. description text for the open entry
        if state.is_open():
            _collect_description(state, line)
        i += 1

    state.flush()
    debug("extract_experience", f"found {len(state.entries)}")
    return state.entries
