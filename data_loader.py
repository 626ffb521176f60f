# data_loader.py

from pathlib import Path
from typing import Union

PDF_CONTENT_NEEDS_MANUAL_INPUT = "PDF_CONTENT_NEEDS_MANUAL_INPUT"
UNSUPPORTED_FILE_TYPE = "UNSUPPORTED_FILE_TYPE"
SENTINELS = {PDF_CONTENT_NEEDS_MANUAL_INPUT, UNSUPPORTED_FILE_TYPE}

TEXT_SUFFIXES = {".txt", ".text", ".md"}
MANUAL_INPUT_SUFFIXES = {".pdf", ".doc", ".docx"}


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="ignore")


def _classify(suffix: str) -> str:
    if suffix in TEXT_SUFFIXES:
        return "text"
    if suffix in MANUAL_INPUT_SUFFIXES:
        return PDF_CONTENT_NEEDS_MANUAL_INPUT
    return UNSUPPORTED_FILE_TYPE


def load_resume(file_path: Union[str, Path]) -> str:
    """
    Load raw text from a plain-text resume file.

    PDF and Word documents are not extracted; they return the
    PDF_CONTENT_NEEDS_MANUAL_INPUT sentinel so the caller can ask for
    pasted text. Any other file type returns UNSUPPORTED_FILE_TYPE.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")

    kind = _classify(path.suffix.lower())
    if kind != "text":
        return kind
    return _decode(path.read_bytes()).strip()


def load_resume_bytes(filename: str, data: bytes) -> str:
    """Same as load_resume for an in-memory upload."""
    kind = _classify(Path(filename or "").suffix.lower())
    if kind != "text":
        return kind
    return _decode(data or b"").strip()


def is_sentinel(text: str) -> bool:
    return text in SENTINELS
