"""Professional summary/objective extraction from resume text."""

import re

from .sections import section_lines
from .vocabulary import SUMMARY_HEADERS


_MAX_SUMMARY_CHARS = 1000
_FALLBACK_LINES = 5
_STOP_RE = re.compile(r"experience|education|skills", re.IGNORECASE)


def _truncate(summary: str) -> str:
    """Cut a summary to the length limit, preferring a sentence boundary."""
    if len(summary) <= _MAX_SUMMARY_CHARS:
        return summary

    sentences = re.split(r"(?<=[.!?])\s+", summary)
    out = ""
    for sentence in sentences:
        if len(out) + len(sentence) + 1 > _MAX_SUMMARY_CHARS:
            break
        out += sentence + " "
    return out.strip() or summary[:_MAX_SUMMARY_CHARS]


def extract_summary(text: str) -> str:
    """Extract professional summary or objective from resume text.

    Uses the body of a Summary/Profile/Objective section when one exists.
    Otherwise falls back to the opening lines of the document, up to five of
    them, stopping at the first line that mentions experience, education or
    skills.

    Args:
        text: Raw resume text

    Returns:
        Summary text or empty string if not found
    """
    if not text or not text.strip():
        return ""

    lines = section_lines(text, SUMMARY_HEADERS)
    if lines:
        cleaned = [re.sub(r"^[\s•\-*>◦▪]+", "", ln).strip() for ln in lines]
        summary = re.sub(r"\s+", " ", " ".join(ln for ln in cleaned if ln)).strip()
        return _truncate(summary)

    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    stop_idx = next((i for i, ln in enumerate(lines) if _STOP_RE.search(ln)), -1)
    end = min(len(lines), _FALLBACK_LINES) if stop_idx == -1 else min(stop_idx, _FALLBACK_LINES)
    summary = re.sub(r"\s+", " ", " ".join(lines[:end])).strip()
    return _truncate(summary)
