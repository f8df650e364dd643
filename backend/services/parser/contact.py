"""Contact information extraction (name, email, phone, headline, location) from resume text."""

import re
from typing import List

from .sections import is_section_header
from .vocabulary import DOCUMENT_TITLES


_EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
_PHONE_RE = re.compile(r"(\+?\d{1,3}[-.\s]?)?(\d{3}[-.\s]?\d{3}[-.\s]?\d{4})")
_URL_HINT_RE = re.compile(r"https?://|www\.|\.com\b|\.io\b|linkedin|github", re.IGNORECASE)
_LOCATION_RE = re.compile(r"^[A-Z][A-Za-z.'\- ]+,\s*[A-Z][A-Za-z.'\- ]+$")
_SEGMENT_SPLIT_RE = re.compile(r"\s*[|•·]\s*")

# How far into the document the header block is assumed to reach
_HEADER_WINDOW = 6


def _non_empty_lines(text: str) -> List[str]:
    return [ln.strip() for ln in (text or "").splitlines() if ln.strip()]


def _is_document_title(line: str) -> bool:
    low = line.strip().lower().rstrip(":")
    return low in DOCUMENT_TITLES or any(low.startswith(t + " ") for t in DOCUMENT_TITLES if t != "cv")


def _is_contact_line(line: str) -> bool:
    return bool(_EMAIL_RE.search(line) or _PHONE_RE.search(line) or _URL_HINT_RE.search(line))


def extract_email(text: str) -> str:
    """Extract the first email address found in the text."""
    if not text:
        return ""
    m = _EMAIL_RE.search(text)
    return m.group(0) if m else ""


def extract_phone(text: str) -> str:
    """Extract the first phone-number-like sequence found in the text."""
    if not text:
        return ""
    m = _PHONE_RE.search(text)
    return m.group(0).strip() if m else ""


def _name_index(lines: List[str]) -> int:
    for i, line in enumerate(lines):
        if is_section_header(line) or _is_document_title(line):
            continue
        return i
    return -1


def extract_name(text: str) -> str:
    """Extract the candidate name.

    The name is taken to be the first non-empty line that is neither a section
    header nor a document title such as "Resume" or "Curriculum Vitae".
    """
    lines = _non_empty_lines(text)
    idx = _name_index(lines)
    return lines[idx] if idx >= 0 else ""


def extract_headline(text: str) -> str:
    """Extract a one-line professional headline printed under the name."""
    lines = _non_empty_lines(text)
    idx = _name_index(lines)
    if idx < 0 or idx + 1 >= len(lines):
        return ""

    cand = lines[idx + 1]
    if len(cand) > 100 or is_section_header(cand) or _is_contact_line(cand):
        return ""
    if _LOCATION_RE.match(cand):
        return ""
    if sum(ch.isdigit() for ch in cand) > 2:
        return ""
    return cand


def extract_location(text: str) -> str:
    """Extract a "City, Region" location from the header block.

    Header lines are often several fields glued with pipes or bullets, so each
    segment is checked on its own.
    """
    lines = _non_empty_lines(text)
    idx = _name_index(lines)
    for line in lines[idx + 1:idx + 1 + _HEADER_WINDOW] if idx >= 0 else []:
        if is_section_header(line):
            break
        for segment in _SEGMENT_SPLIT_RE.split(line):
            segment = segment.strip()
            if not segment or _is_contact_line(segment):
                continue
            if _LOCATION_RE.match(segment) and len(segment) <= 60:
                return segment
    return ""
