"""Section segmentation for resume text."""

import re
from typing import Iterable, List

from .vocabulary import NEXT_SECTION_HEADERS


def normalize_header(line: str) -> str:
    """Lowercase a line and drop a trailing colon so it can be compared to header labels."""
    return re.sub(r"\s+", " ", line.strip().lower()).rstrip(":").strip()


def is_section_header(line: str) -> bool:
    """Check if a line equals one of the known section header labels."""
    return normalize_header(line) in NEXT_SECTION_HEADERS


def extract_section(text: str, headers: Iterable[str]) -> str:
    """Return the body of the first section opened by one of ``headers``.

    The section starts on the line after the first line that equals one of
    ``headers`` (case-insensitive, optional trailing colon) and runs up to,
    but not including, the next line that equals any known section header.

    Args:
        text: Raw resume text
        headers: Candidate header labels, lowercase

    Returns:
        Section lines joined by newlines, or an empty string if no header matched
    """
    if not text:
        return ""

    wanted = {normalize_header(h) for h in headers}
    lines = [ln.strip() for ln in text.splitlines()]

    start = None
    for i, line in enumerate(lines):
        if line and normalize_header(line) in wanted:
            start = i + 1
            break

    if start is None:
        return ""

    body: List[str] = []
    for line in lines[start:]:
        if line and is_section_header(line):
            break
        body.append(line)

    return "\n".join(body).strip()


def section_lines(text: str, headers: Iterable[str]) -> List[str]:
    """Return the non-empty, stripped lines of a section."""
    section = extract_section(text, headers)
    return [ln.strip() for ln in section.splitlines() if ln.strip()]
