"""Work experience extraction from resume text.

PDF extraction glues title, company and dates onto single lines in no fixed
order, so each candidate header line goes through an ordered table of line
rules: a date range, then a single trailing date, then a delimiter split.
A line none of them claim becomes the title as a whole.
"""

import re
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .dates import (
    DATE_RANGE_RE,
    DATE_RE,
    TRAILING_DATE_RE,
    contains_date,
    is_current,
    match_date_only,
)
from .models import ExperienceEntry
from .sections import section_lines
from .vocabulary import EXPERIENCE_HEADERS, MAX_DESCRIPTION_LINES, MAX_EXPERIENCE


logger = logging.getLogger(__name__)


BULLET_RE = re.compile(r"^[•\-*▪◦●‣–]\s*")
DELIMITER_RE = re.compile(r"\s*\|\s*|\s+[-–—]\s+|\s*,\s+|\s+at\s+|\s+@\s+")
REMOTE_SUFFIX_RE = re.compile(r"[\s,|\-–—(]*\bRemote\b\)?\s*$", re.IGNORECASE)

# A new entry header is a short line carrying a date or a delimiter
_HEADER_MAX_LEN = 80


@dataclass
class LineMatch:
    """Fields recovered from one header line."""
    tag: str
    title: str = ""
    company: str = ""
    from_date: str = ""
    to_date: str = ""


def is_bullet(line: str) -> bool:
    return bool(BULLET_RE.match(line))


def strip_bullet(line: str) -> str:
    return BULLET_RE.sub("", line).strip()


def strip_remote(company: str) -> str:
    """Drop a trailing "Remote" work-location artifact from a company name."""
    return REMOTE_SUFFIX_RE.sub("", company).strip(" ,|-–—")


def _split_fields(segment: str) -> List[str]:
    """Split on delimiters, dropping empty and date-only tokens."""
    parts = [p.strip(" ,|-–—()") for p in DELIMITER_RE.split(segment)]
    return [p for p in parts if p and not DATE_RE.fullmatch(p)]


def _title_company(segment: str) -> Tuple[str, str]:
    fields = _split_fields(segment)
    title = fields[0] if fields else ""
    company = fields[1] if len(fields) > 1 else ""
    return title, company


def _match_range(line: str) -> Optional[LineMatch]:
    m = DATE_RANGE_RE.search(line)
    if not m:
        return None
    # Text on either side of the range may hold title/company
    head = line[:m.start()].strip(" ,|-–—(")
    tail = line[m.end():].strip(" ,|-–—)")
    title, company = _title_company(head)
    if not company and tail:
        if title:
            company = _title_company(tail)[0]
        else:
            title, company = _title_company(tail)
    return LineMatch(
        tag="range",
        title=title,
        company=company,
        from_date=m.group("start").strip(),
        to_date=m.group("end").strip(),
    )


def _match_single_date(line: str) -> Optional[LineMatch]:
    m = TRAILING_DATE_RE.search(line)
    if not m:
        return None
    head = line[:m.start()].strip(" ,|-–—(")
    if not head:
        return None
    title, company = _title_company(head)
    return LineMatch(tag="single_date", title=title, company=company, from_date=m.group("date").strip())


def _match_delimited(line: str) -> Optional[LineMatch]:
    fields = _split_fields(line)
    if len(fields) < 2:
        return None
    return LineMatch(tag="delimited", title=fields[0], company=fields[1])


# Evaluated in order; the first rule that returns a match wins
LINE_RULES: List[Tuple[str, Callable[[str], Optional[LineMatch]]]] = [
    ("range", _match_range),
    ("single_date", _match_single_date),
    ("delimited", _match_delimited),
]


def classify_line(line: str) -> Optional[LineMatch]:
    """Run a candidate header line through the rule table.

    Returns:
        LineMatch from the first matching rule, a raw-title match for any
        other non-bullet line, or None for bullet lines
    """
    if is_bullet(line):
        return None
    for _tag, rule in LINE_RULES:
        match = rule(line)
        if match is not None:
            return match
    return LineMatch(tag="raw", title=line.strip())


def looks_like_entry_header(line: str) -> bool:
    """Check if a line looks like the start of a new experience entry."""
    if is_bullet(line) or len(line) > _HEADER_MAX_LEN:
        return False
    return contains_date(line) or bool(re.search(r"\||\s[-–—]\s|,\s", line))


def _apply_dates(entry: ExperienceEntry, start: str, end: str) -> None:
    entry.from_date = start
    entry.to_date = end
    entry.current = is_current(end)


def _has_dates(entry: ExperienceEntry) -> bool:
    return bool(entry.from_date or entry.to_date)


def _take_company_line(entry: ExperienceEntry, line: str) -> bool:
    """Use the line after an entry header as company (and dates, if it has them).

    Returns:
        True if the line was consumed
    """
    if is_bullet(line):
        return False

    dates = match_date_only(line)
    if dates:
        if _has_dates(entry):
            return False
        _apply_dates(entry, *dates)
        return True

    if contains_date(line):
        # A dated line after a dated header is the next entry
        if _has_dates(entry):
            return False
        match = classify_line(line)
        if match is None:
            return False
        entry.company = strip_remote(match.title)
        if match.from_date or match.to_date:
            _apply_dates(entry, match.from_date, match.to_date)
        return True

    entry.company = strip_remote(line)
    return True


def _build_entry(match: LineMatch) -> ExperienceEntry:
    entry = ExperienceEntry(title=match.title, company=strip_remote(match.company))
    if match.from_date or match.to_date:
        _apply_dates(entry, match.from_date, match.to_date)
    return entry


def parse_experience_lines(lines: List[str]) -> List[ExperienceEntry]:
    """Structure experience section lines into entries.

    Args:
        lines: Stripped, non-empty lines of the experience section

    Returns:
        Up to five ExperienceEntry objects
    """
    entries: List[ExperienceEntry] = []
    n = len(lines)
    i = 0

    while i < n and len(entries) < MAX_EXPERIENCE:
        match = classify_line(lines[i])
        i += 1
        if match is None:
            # Orphan bullet with no entry header above it
            continue

        entry = _build_entry(match)

        # A bare date line heads the entry; the title follows it
        if not entry.title and not entry.company and i < n:
            follow = lines[i]
            if not is_bullet(follow) and not contains_date(follow):
                title_match = classify_line(follow)
                entry.title = title_match.title
                entry.company = strip_remote(title_match.company)
                i += 1

        # Dates printed on a line of their own under the title
        if not _has_dates(entry) and i < n:
            dates = match_date_only(lines[i])
            if dates:
                _apply_dates(entry, *dates)
                i += 1

        if not entry.company and i < n and _take_company_line(entry, lines[i]):
            i += 1
            if not _has_dates(entry) and i < n:
                dates = match_date_only(lines[i])
                if dates:
                    _apply_dates(entry, *dates)
                    i += 1

        description: List[str] = []
        while i < n and len(description) < MAX_DESCRIPTION_LINES:
            line = lines[i]
            if not is_bullet(line) and looks_like_entry_header(line):
                break
            description.append(strip_bullet(line))
            i += 1

        if len(description) >= MAX_DESCRIPTION_LINES:
            # Skip the overflow rather than mistaking it for new entries
            while i < n and (is_bullet(lines[i]) or not looks_like_entry_header(lines[i])):
                i += 1

        entry.description = "\n".join(d for d in description if d)

        if not entry.title and not entry.company:
            continue
        entries.append(entry)

    return entries


def extract_experience(text: str) -> List[ExperienceEntry]:
    """Extract work experience entries from resume text.

    Args:
        text: Raw resume text

    Returns:
        List of ExperienceEntry objects (at most five); empty when the resume
        has no experience section
    """
    lines = section_lines(text, EXPERIENCE_HEADERS)
    if not lines:
        return []

    entries = parse_experience_lines(lines)
    logger.debug(f"Parsed {len(entries)} experience entries from {len(lines)} lines")
    return entries
