"""Skills extraction from resume text."""

import re
from typing import List, Set

from .sections import normalize_header, section_lines
from .vocabulary import MAX_SKILLS, SKILLS_HEADERS, SKILLS_VOCABULARY


# Section body separators: comma, bullets, semicolon, pipe, hyphen
_TOKEN_SPLIT_RE = re.compile(r"[,\u2022·;|\-]")
_LABEL_RE = re.compile(r"^([A-Za-z][A-Za-z &/]{1,40}):\s*")

_MIN_TOKEN_LEN = 2
_MAX_TOKEN_LEN = 29


def _vocabulary_pattern(term: str) -> re.Pattern:
    # Letters, digits, '+' and '#' all count as word characters for tech names
    return re.compile(
        rf"(?<![A-Za-z0-9+#]){re.escape(term)}(?![A-Za-z0-9+#])",
        re.IGNORECASE,
    )


_VOCABULARY_PATTERNS = [(term, _vocabulary_pattern(term)) for term in SKILLS_VOCABULARY]


def find_vocabulary_skills(text: str) -> List[str]:
    """Return vocabulary skills mentioned as whole words, in vocabulary order."""
    if not text:
        return []
    return [term for term, pattern in _VOCABULARY_PATTERNS if pattern.search(text)]


def _section_tokens(text: str) -> List[str]:
    """Split the Skills section body into candidate skill tokens."""
    tokens: List[str] = []
    for line in section_lines(text, SKILLS_HEADERS):
        m = _LABEL_RE.match(line)
        if m:
            line = line[m.end():]
        for chunk in _TOKEN_SPLIT_RE.split(line):
            token = chunk.strip().strip(".:")
            if _MIN_TOKEN_LEN <= len(token) <= _MAX_TOKEN_LEN and normalize_header(token) not in SKILLS_HEADERS:
                tokens.append(token)
    return tokens


def extract_skills(text: str) -> List[str]:
    """Extract skills from resume text.

    Union of whole-word matches against the skills vocabulary and the tokens
    listed under a Skills section. Deduplication is case-sensitive.

    Args:
        text: Raw resume text

    Returns:
        Up to 15 skills, order preserved
    """
    if not text:
        return []

    seen: Set[str] = set()
    result: List[str] = []
    for skill in find_vocabulary_skills(text) + _section_tokens(text):
        if skill in seen:
            continue
        seen.add(skill)
        result.append(skill)
        if len(result) >= MAX_SKILLS:
            break

    return result
