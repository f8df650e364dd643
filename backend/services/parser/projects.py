"""Project extraction from resume text."""

import re
from typing import List

from .experience import is_bullet, strip_bullet
from .models import ProjectEntry
from .sections import section_lines
from .skills import find_vocabulary_skills
from .vocabulary import MAX_PROJECTS, PROJECTS_HEADERS


# Lines looked at after the project name line
LOOKAHEAD = 4

URL_RE = re.compile(
    r"(?:https?://[^\s|,()]+|(?:www\.)?(?:github\.com|gitlab\.com|bitbucket\.org)/[^\s|,()]+)",
    re.IGNORECASE,
)
_NAME_SPLIT_RE = re.compile(r"\s*[:|]\s*|\s+[-–—]\s+")


def _clean_project_name(name: str) -> str:
    """Clean and normalize project name."""
    name = re.sub(r"^\s*\d+[.)]\s+", "", name)
    name = re.sub(r"[\s:\-|]+$", "", name)
    return " ".join(name.split())


def _normalize_link(url: str) -> str:
    url = url.rstrip(".;")
    if not url.lower().startswith(("http://", "https://")):
        url = "https://" + url
    return url


def parse_project_lines(lines: List[str]) -> List[ProjectEntry]:
    """Structure project section lines into entries.

    A non-bullet line starts a project. Text after a ``:``, ``|`` or dash on
    that line, and up to four following bullet lines, form its description.
    A URL anywhere in that window becomes the project link.
    """
    projects: List[ProjectEntry] = []
    n = len(lines)
    i = 0

    while i < n and len(projects) < MAX_PROJECTS:
        line = lines[i]
        if is_bullet(line):
            i += 1
            continue

        link = ""
        m = URL_RE.search(line)
        if m:
            link = _normalize_link(m.group(0))
            line = (line[:m.start()] + line[m.end():]).strip()

        parts = [p for p in _NAME_SPLIT_RE.split(line, maxsplit=1) if p.strip()]
        name = _clean_project_name(parts[0]) if parts else ""
        description: List[str] = [parts[1].strip()] if len(parts) > 1 else []

        j = i + 1
        while j < n and j <= i + LOOKAHEAD and is_bullet(lines[j]):
            body = strip_bullet(lines[j])
            m = URL_RE.search(body)
            if m and not link:
                link = _normalize_link(m.group(0))
            description.append(body)
            j += 1

        i = j
        if not name:
            continue

        desc_text = " ".join(d for d in description if d)
        projects.append(ProjectEntry(
            name=name,
            description=desc_text,
            link=link,
            technologies=find_vocabulary_skills(name + " " + desc_text),
        ))

    return projects


def extract_projects(text: str) -> List[ProjectEntry]:
    """Extract projects from resume text.

    Args:
        text: Raw resume text

    Returns:
        List of ProjectEntry objects (at most five)
    """
    lines = section_lines(text, PROJECTS_HEADERS)
    if not lines:
        return []
    return parse_project_lines(lines)
