"""Data models and types for the resume parser."""

from dataclasses import dataclass, field
from typing import List
from enum import Enum


class FileType(Enum):
    """Supported upload types for parsing."""
    PDF = "pdf"
    DOCX = "docx"
    TXT = "txt"


@dataclass
class ExperienceEntry:
    """A single work experience entry."""
    title: str = ""
    company: str = ""
    from_date: str = ""
    to_date: str = ""
    current: bool = False
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "company": self.company,
            "from": self.from_date,
            "to": self.to_date,
            "current": self.current,
            "description": self.description,
        }


@dataclass
class EducationEntry:
    """A single education entry."""
    school: str = ""
    degree: str = ""
    field: str = ""
    from_date: str = ""
    to_date: str = ""
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "school": self.school,
            "degree": self.degree,
            "field": self.field,
            "from": self.from_date,
            "to": self.to_date,
            "description": self.description,
        }


@dataclass
class ProjectEntry:
    """A single project entry."""
    name: str = ""
    description: str = ""
    link: str = ""
    technologies: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "link": self.link,
            "technologies": self.technologies,
        }


@dataclass
class CertificationEntry:
    """A single certification entry."""
    name: str = ""
    issuer: str = ""
    date: str = ""
    credential_id: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "issuer": self.issuer,
            "date": self.date,
            "credential_id": self.credential_id,
        }


@dataclass
class SocialLinks:
    """Social and professional links."""
    linkedin: str = ""
    github: str = ""
    twitter: str = ""
    portfolio: str = ""

    def to_dict(self) -> dict:
        return {
            "linkedin": self.linkedin,
            "github": self.github,
            "twitter": self.twitter,
            "portfolio": self.portfolio,
        }


@dataclass
class ParsedProfile:
    """Profile suggestions parsed from one resume upload."""
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    headline: str = ""
    summary: str = ""
    skills: List[str] = field(default_factory=list)
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    certifications: List[CertificationEntry] = field(default_factory=list)
    social_links: SocialLinks = field(default_factory=SocialLinks)

    def is_empty(self) -> bool:
        """True when nothing at all could be extracted."""
        return not any((
            self.name, self.email, self.phone, self.location, self.headline,
            self.summary, self.skills, self.experience, self.education,
            self.projects, self.certifications,
            any(self.social_links.to_dict().values()),
        ))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "headline": self.headline,
            "summary": self.summary,
            "skills": self.skills,
            "experience": [e.to_dict() for e in self.experience],
            "education": [e.to_dict() for e in self.education],
            "projects": [p.to_dict() for p in self.projects],
            "certifications": [c.to_dict() for c in self.certifications],
            "social_links": self.social_links.to_dict(),
        }
