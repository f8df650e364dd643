"""Main resume parser facade with unified API."""

import logging
from typing import Any, Dict, Optional

from .models import ParsedProfile
from .contact import (
    extract_email,
    extract_phone,
    extract_name,
    extract_headline,
    extract_location,
)
from .education import extract_education
from .experience import extract_experience
from .skills import extract_skills
from .projects import extract_projects
from .certifications import extract_certifications
from .links import extract_links
from .summary import extract_summary
from .readers import extract_text
from .vocabulary import (
    MAX_CERTIFICATIONS,
    MAX_EDUCATION,
    MAX_EXPERIENCE,
    MAX_PROJECTS,
    MAX_SKILLS,
)


logger = logging.getLogger(__name__)


class ResumeParser:
    """Unified resume parser built from the per-section extractors.

    Every field is a best-effort guess: absent data comes back as an empty
    string or list, never as an exception.

    Usage:
        parser = ResumeParser()
        profile = parser.parse_bytes(data, "application/pdf")
        print(profile.email)
        print(profile.skills)
    """

    def parse_bytes(self, data: bytes, content_type: Optional[str], filename: Optional[str] = None) -> ParsedProfile:
        """Parse an uploaded resume document.

        Args:
            data: Raw upload bytes
            content_type: Declared MIME type of the upload
            filename: Original filename

        Returns:
            ParsedProfile with all extracted information

        Raises:
            UnsupportedFileType: If the upload is not PDF, DOCX or text
            ResumeReadError: If the document cannot be decoded
        """
        text = extract_text(data, content_type, filename)
        return self.parse_text(text)

    def parse_text(self, text: str) -> ParsedProfile:
        """Parse resume text and extract structured data.

        Args:
            text: Raw resume text

        Returns:
            ParsedProfile with all extracted information
        """
        if not text or not text.strip():
            return ParsedProfile()

        profile = ParsedProfile(
            name=extract_name(text),
            email=extract_email(text),
            phone=extract_phone(text),
            location=extract_location(text),
            headline=extract_headline(text),
            summary=extract_summary(text),
            skills=extract_skills(text)[:MAX_SKILLS],
            experience=extract_experience(text)[:MAX_EXPERIENCE],
            education=extract_education(text)[:MAX_EDUCATION],
            projects=extract_projects(text)[:MAX_PROJECTS],
            certifications=extract_certifications(text)[:MAX_CERTIFICATIONS],
            social_links=extract_links(text),
        )

        logger.debug(
            f"Parsed profile: {len(profile.skills)} skills, {len(profile.experience)} experience, "
            f"{len(profile.education)} education, {len(profile.projects)} projects, "
            f"{len(profile.certifications)} certifications"
        )
        return profile


def parse_resume_text(text: str) -> Dict[str, Any]:
    """Parse resume text and return a dictionary.

    Args:
        text: Raw resume text

    Returns:
        Dictionary with extracted information
    """
    return ResumeParser().parse_text(text).to_dict()


def parse_resume_bytes(data: bytes, content_type: Optional[str], filename: Optional[str] = None) -> Dict[str, Any]:
    """Parse an uploaded resume document and return a dictionary."""
    return ResumeParser().parse_bytes(data, content_type, filename).to_dict()
