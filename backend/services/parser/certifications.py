"""Certification extraction from resume text."""

import re
from typing import List, Tuple

from .dates import MONTH_YEAR_RE, YEAR_RE, match_date_only
from .experience import is_bullet, strip_bullet
from .models import CertificationEntry
from .sections import is_section_header, section_lines
from .vocabulary import CERTIFICATION_HEADERS, KNOWN_ISSUERS, MAX_CERTIFICATIONS


# Lines looked at after the certification name line
LOOKAHEAD = 3

_ISSUER_RES: List[Tuple[str, re.Pattern]] = [
    (issuer, re.compile(rf"(?<![A-Za-z]){re.escape(issuer)}(?![A-Za-z])", re.IGNORECASE))
    for issuer in KNOWN_ISSUERS
]
_CERT_KEYWORD_RE = re.compile(r"certificat", re.IGNORECASE)
_ISSUED_BY_RE = re.compile(
    r"(?:issued\s+by|issuer|by)\s*:?\s+([A-Z][A-Za-z0-9&.\- ]{1,40}?)(?=\s*(?:[,|(\n]|\s[-–—]\s|$|\b(?:19|20)\d{2}\b))",
    re.IGNORECASE,
)
_CREDENTIAL_RE = re.compile(r"(?:credential|certificate|license)\s*(?:id|#|no\.?)\s*:?\s*([A-Za-z0-9\-]{4,})", re.IGNORECASE)
_NAME_SPLIT_RE = re.compile(r"\s*[|,(]\s*|\s+[-–—]\s+")
_DETAIL_LINE_RE = re.compile(r"^(?:issued|issuer|credential|certificate\s+id|license|by\b)", re.IGNORECASE)


def _known_issuer(text: str) -> str:
    for issuer, pattern in _ISSUER_RES:
        if pattern.search(text):
            return issuer
    return ""


def _extract_issuer(text: str) -> str:
    """Extract issuer from certification text."""
    issuer = _known_issuer(text)
    if issuer:
        return issuer
    m = _ISSUED_BY_RE.search(text)
    return m.group(1).strip() if m else ""


def _extract_date(text: str) -> str:
    m = MONTH_YEAR_RE.search(text)
    if m:
        return m.group(0)
    m = YEAR_RE.search(text)
    return m.group(0) if m else ""


def _extract_credential_id(text: str) -> str:
    m = _CREDENTIAL_RE.search(text)
    return m.group(1) if m else ""


def _clean_cert_name(line: str) -> str:
    name = _NAME_SPLIT_RE.split(line, maxsplit=1)[0]
    name = re.sub(r"^\s*\d+[.)]\s+", "", name)
    return " ".join(name.split()).strip(" :-")


def _is_detail_line(line: str) -> bool:
    """Check if a line adds issuer/date/credential detail to the entry above."""
    body = strip_bullet(line)
    if is_bullet(line) or match_date_only(body) or _DETAIL_LINE_RE.match(body):
        return True
    return any(body.lower() == issuer.lower() for issuer in KNOWN_ISSUERS)


def _is_anchor(line: str, in_section: bool) -> bool:
    if is_section_header(line):
        return False
    if in_section:
        return not is_bullet(line)
    if _CERT_KEYWORD_RE.search(line) or re.search(r"\bcertified\b", line, re.IGNORECASE):
        return True
    # Bullets under a job often name a vendor; only headline lines anchor on an issuer
    return not is_bullet(line) and bool(_known_issuer(line))


def parse_certification_lines(lines: List[str], in_section: bool = True) -> List[CertificationEntry]:
    """Structure certification lines into entries.

    Inside a certifications section every non-bullet line starts an entry.
    Outside one, non-bullet lines mentioning a certificate or a known issuer do.
    Up to three following detail lines supply issuer, date and credential id.
    """
    certifications: List[CertificationEntry] = []
    n = len(lines)
    i = 0

    while i < n and len(certifications) < MAX_CERTIFICATIONS:
        line = lines[i]
        if not _is_anchor(line, in_section):
            i += 1
            continue

        window = [line]
        j = i + 1
        while j < n and j <= i + LOOKAHEAD and _is_detail_line(lines[j]):
            window.append(strip_bullet(lines[j]))
            j += 1
        i = j

        name = _clean_cert_name(strip_bullet(line))
        if not name:
            continue

        full_text = " | ".join(window)
        certifications.append(CertificationEntry(
            name=name,
            issuer=_extract_issuer(full_text),
            date=_extract_date(full_text),
            credential_id=_extract_credential_id(full_text),
        ))

    return certifications


def extract_certifications(text: str) -> List[CertificationEntry]:
    """Extract certifications from resume text.

    Uses the certifications section when present, otherwise scans the whole
    text for lines that mention a certificate.

    Args:
        text: Raw resume text

    Returns:
        List of CertificationEntry objects (at most five)
    """
    if not text:
        return []

    lines = section_lines(text, CERTIFICATION_HEADERS)
    if lines:
        return parse_certification_lines(lines, in_section=True)

    all_lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    return parse_certification_lines(all_lines, in_section=False)
