# text_normalizer.py
# --- Raw resume text -> ordered list of clean, non-empty lines ---

import re
from typing import List

from nlp.debug import debug
from nlp.heuristics import DESPACE_ACRONYMS

_SPACE_RUN = re.compile(r" +")
_BLANK_RUN = re.compile(r"\n\s*\n")
_NEWLINE_RUN = re.compile(r"\n+")


def clean_text(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("\t", " ")
    text = _SPACE_RUN.sub(" ", text)
    text = _BLANK_RUN.sub("\n\n", text)
    text = _NEWLINE_RUN.sub("\n", text)
    return text.strip()


def despace_line(line: str) -> str:
    """Collapse letter-spaced text ("K A R E N") into a single word.

    A line is letter-spaced when it has more than three tokens and more
    than 70% of them are a single character. Known acronyms keep their
    original spacing.
    """
    words = line.split()
    if len(words) <= 3:
        return line
    single = sum(1 for w in words if len(w) == 1)
    joined = "".join(words)
    if single > len(words) * 0.7 and len(joined) >= 3:
        if joined.upper() in DESPACE_ACRONYMS:
            return line
        return joined
    return line


def normalize_lines(text: str) -> List[str]:
    if not text:
        debug("normalize", "empty input")
        return []
    cleaned = clean_text(text)
    lines = [ln.strip() for ln in cleaned.split("\n")]
    lines = [despace_line(ln) for ln in lines if ln]
    debug("normalize", f"input chars={len(text)}, kept {len(lines)} lines")
    return lines
