"""Education history extraction from resume text."""

import re
import logging
from typing import List, Tuple

from .dates import DATE_RANGE_RE, YEAR_RE
from .models import EducationEntry
from .sections import section_lines
from .vocabulary import EDUCATION_HEADERS, INSTITUTION_HINTS, MAX_EDUCATION


logger = logging.getLogger(__name__)


# Lines looked at after the institution line for degree, field and dates
LOOKAHEAD = 3

INSTITUTION_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(h) for h in INSTITUTION_HINTS) + r")\b",
    re.IGNORECASE,
)

DEGREE_RE = re.compile(
    r"(?<![A-Za-z])(?P<degree>"
    r"(?:Bachelor|Master)(?:'s)?(?:\s+of\s+(?:Science|Arts|Engineering|Technology|"
    r"Business Administration|Computer Applications|Fine Arts))?"
    r"|Associate(?:'s)?\s+(?:Degree|of\s+(?:Science|Arts))"
    r"|Doctor\s+of\s+Philosophy|Ph\.?\s?D\.?"
    r"|High\s+School\s+Diploma|Diploma"
    r"|MBA|BBA|BCA|MCA"
    r"|B\.?\s?Tech|M\.?\s?Tech|B\.?\s?Sc\.?|M\.?\s?Sc\.?"
    r"|B\.S\.|M\.S\.|B\.A\.|M\.A\.|B\.E\.|M\.E\.|BS|MS|BA"
    r")(?![A-Za-z])"
)

_FIELD_LEAD_RE = re.compile(r"^[\s,:\-–—]*(?:(?:in|of)\s+)?", re.IGNORECASE)
_FIELD_CUT_RE = re.compile(r"\s*(?:[|,(]|\s[-–—]\s|\b(?:19|20)\d{2}\b|\bGPA\b|\bCGPA\b).*$", re.IGNORECASE)
_SEGMENT_RE = re.compile(r"\s*[|,]\s*|\s+[-–—]\s+")


def _is_institution_line(line: str) -> bool:
    return bool(INSTITUTION_RE.search(line))


def _school_name(line: str) -> str:
    """Pick the delimiter-separated segment that names the institution."""
    line = DATE_RANGE_RE.sub(" ", line)
    for segment in _SEGMENT_RE.split(line):
        segment = YEAR_RE.sub("", segment).strip(" ,|-–—()")
        if segment and _is_institution_line(segment) and not DEGREE_RE.match(segment):
            return segment
    return ""


def _degree_and_field(line: str) -> Tuple[str, str]:
    m = DEGREE_RE.search(line)
    if not m:
        return "", ""
    degree = m.group("degree").strip()
    rest = _FIELD_LEAD_RE.sub("", line[m.end():], count=1)
    rest = _FIELD_CUT_RE.sub("", rest).strip(" .,-–—")
    if rest and rest[0].isalpha() and not _is_institution_line(rest):
        return degree, rest
    return degree, ""


def _dates(line: str) -> Tuple[str, str]:
    m = DATE_RANGE_RE.search(line)
    if m:
        return m.group("start").strip(), m.group("end").strip()
    years = YEAR_RE.findall(line)
    if len(years) >= 2:
        return years[0], years[-1]
    if len(years) == 1:
        # A lone year is the graduation year
        return "", years[0]
    return "", ""


def _fill_from_line(entry: EducationEntry, line: str) -> None:
    if not entry.degree:
        degree, field_of_study = _degree_and_field(line)
        if degree:
            entry.degree = degree
            entry.field = field_of_study
    if not entry.from_date and not entry.to_date:
        entry.from_date, entry.to_date = _dates(line)


def parse_education_lines(lines: List[str]) -> List[EducationEntry]:
    """Structure education section lines into entries.

    Each entry is anchored on a line naming an institution; up to three
    following lines (stopping at the next institution) supply degree, field
    of study and dates.
    """
    entries: List[EducationEntry] = []
    n = len(lines)
    i = 0

    while i < n and len(entries) < MAX_EDUCATION:
        line = lines[i]
        if not _is_institution_line(line):
            i += 1
            continue

        school = _school_name(line)
        if not school:
            i += 1
            continue

        entry = EducationEntry(school=school)
        _fill_from_line(entry, line)

        # A degree line printed just above the institution
        if not entry.degree and i > 0 and not _is_institution_line(lines[i - 1]):
            degree, field_of_study = _degree_and_field(lines[i - 1])
            if degree:
                entry.degree, entry.field = degree, field_of_study
                if not entry.from_date and not entry.to_date:
                    entry.from_date, entry.to_date = _dates(lines[i - 1])

        notes: List[str] = []
        j = i + 1
        while j < n and j <= i + LOOKAHEAD and not _is_institution_line(lines[j]):
            before = (entry.degree, entry.from_date, entry.to_date)
            _fill_from_line(entry, lines[j])
            if (entry.degree, entry.from_date, entry.to_date) == before:
                notes.append(re.sub(r"^[•\-*▪◦●]\s*", "", lines[j]))
            j += 1

        entry.description = " ".join(note for note in notes if note)
        entries.append(entry)
        i = j

    return entries


def extract_education(text: str) -> List[EducationEntry]:
    """Extract education entries from resume text.

    Args:
        text: Raw resume text

    Returns:
        List of EducationEntry objects (at most three)
    """
    lines = section_lines(text, EDUCATION_HEADERS)
    if not lines:
        return []

    entries = parse_education_lines(lines)
    logger.debug(f"Parsed {len(entries)} education entries")
    return entries
