from pydantic import BaseModel, Field


class ExperienceItem(BaseModel):
    title: str = ""
    company: str = ""
    from_: str = Field("", alias="from")
    to: str = ""
    current: bool = False
    description: str = ""

    model_config = {"populate_by_name": True}


class EducationItem(BaseModel):
    school: str = ""
    degree: str = ""
    field: str = ""
    from_: str = Field("", alias="from")
    to: str = ""
    description: str = ""

    model_config = {"populate_by_name": True}


class ProjectItem(BaseModel):
    name: str
    description: str = ""
    link: str = ""
    technologies: list[str] = []


class CertificationItem(BaseModel):
    name: str
    issuer: str = ""
    date: str = ""
    credential_id: str = ""


class SocialLinks(BaseModel):
    linkedin: str = ""
    github: str = ""
    twitter: str = ""
    portfolio: str = ""


class ProfileSuggestions(BaseModel):
    """Parsed resume fields offered to the client for merging into a profile."""
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    headline: str = ""
    summary: str = ""
    skills: list[str] = Field(default_factory=list, max_length=15)
    experience: list[ExperienceItem] = Field(default_factory=list, max_length=5)
    education: list[EducationItem] = Field(default_factory=list, max_length=3)
    projects: list[ProjectItem] = Field(default_factory=list, max_length=5)
    certifications: list[CertificationItem] = Field(default_factory=list, max_length=5)
    social_links: SocialLinks = Field(default_factory=SocialLinks)
