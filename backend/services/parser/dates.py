"""Date token patterns shared by the section structurers."""

import re


MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|"
    r"Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\.?"
)
YEAR = r"(?:19|20)\d{2}"

# "Jan 2020", "January 2020", a bare "Jan", or a bare "2020"
DATE_TOKEN = rf"(?:\b{MONTH}(?![A-Za-z])(?:\s+{YEAR}\b)?|\b{YEAR}\b)"
END_TOKEN = rf"(?:{DATE_TOKEN}|\b(?:Present|Current)\b)"
RANGE_SEP = r"\s*(?:[-–—]|\bto\b)\s*"

DATE_RE = re.compile(DATE_TOKEN, re.IGNORECASE)
DATE_RANGE_RE = re.compile(
    rf"(?P<start>{DATE_TOKEN}){RANGE_SEP}(?P<end>{END_TOKEN})",
    re.IGNORECASE,
)
TRAILING_DATE_RE = re.compile(
    rf"(?P<date>{DATE_TOKEN})[\s).]*$",
    re.IGNORECASE,
)
MONTH_YEAR_RE = re.compile(rf"\b{MONTH}(?![A-Za-z])\s+{YEAR}\b", re.IGNORECASE)
YEAR_RE = re.compile(rf"\b{YEAR}\b")

_CURRENT_RE = re.compile(r"present|current", re.IGNORECASE)
_DATE_ONLY_STRIP = " \t()[]|,.:;"


def is_current(token: str) -> bool:
    """Check if an end-date token marks an ongoing period."""
    return bool(token) and bool(_CURRENT_RE.fullmatch(token.strip()))


def contains_date(line: str) -> bool:
    """Check if a line mentions a year (bare month names are too common in prose)."""
    return bool(YEAR_RE.search(line))


def match_date_only(line: str):
    """Match a line that holds nothing but a date or a date range.

    Returns:
        Tuple of (start, end) strings, or None when the line carries other text
    """
    core = line.strip(_DATE_ONLY_STRIP)
    if not core:
        return None

    m = DATE_RANGE_RE.fullmatch(core)
    if m:
        return m.group("start").strip(), m.group("end").strip()

    m = DATE_RE.fullmatch(core)
    if m:
        return m.group(0).strip(), ""

    return None
