"""Resume Parser Module

A heuristic resume/CV parser that turns an uploaded PDF, DOCX or TXT file into
profile suggestions.

Components:
    - models: Data classes for the parsed profile
    - vocabulary: Section header labels, skills vocabulary and other data tables
    - sections: Section segmenter
    - dates: Shared date patterns
    - contact: Name, email, phone, headline and location extraction
    - links: Social and portfolio links
    - summary: Summary/objective extraction
    - skills: Skills extraction
    - experience: Work experience structurer
    - education: Education structurer
    - projects: Projects structurer
    - certifications: Certifications structurer
    - readers: File format handlers (PDF, DOCX, TXT)
    - parser: Main parser facade

Usage:
    from services.parser import ResumeParser, parse_resume_text

    parser = ResumeParser()
    profile = parser.parse_bytes(data, "application/pdf", "resume.pdf")
    print(profile.email)

    data = parse_resume_text(text)
    print(data["experience"])
"""

from .models import (
    FileType,
    ExperienceEntry,
    EducationEntry,
    ProjectEntry,
    CertificationEntry,
    SocialLinks,
    ParsedProfile,
)

from .sections import extract_section, section_lines

from .contact import (
    extract_email,
    extract_phone,
    extract_name,
    extract_headline,
    extract_location,
)

from .education import extract_education

from .experience import extract_experience, parse_experience_lines

from .skills import extract_skills

from .projects import extract_projects

from .certifications import extract_certifications

from .links import extract_links

from .summary import extract_summary

from .readers import (
    ResumeParserError,
    ResumeReadError,
    UnsupportedFileType,
    detect_file_type,
    extract_text,
    extract_text_from_pdf,
    extract_text_from_docx,
    extract_text_from_txt,
)

from .parser import (
    ResumeParser,
    parse_resume_text,
    parse_resume_bytes,
)


__all__ = [
    # Models
    "FileType",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "CertificationEntry",
    "SocialLinks",
    "ParsedProfile",
    # Main parser
    "ResumeParser",
    "parse_resume_text",
    "parse_resume_bytes",
    # Segmenter
    "extract_section",
    "section_lines",
    # Individual extractors
    "extract_email",
    "extract_phone",
    "extract_name",
    "extract_headline",
    "extract_location",
    "extract_education",
    "extract_experience",
    "parse_experience_lines",
    "extract_skills",
    "extract_projects",
    "extract_certifications",
    "extract_links",
    "extract_summary",
    # File readers
    "ResumeParserError",
    "ResumeReadError",
    "UnsupportedFileType",
    "detect_file_type",
    "extract_text",
    "extract_text_from_pdf",
    "extract_text_from_docx",
    "extract_text_from_txt",
]
