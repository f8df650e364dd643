from models.resume import (
    ProfileSuggestions,
    ExperienceItem,
    EducationItem,
    ProjectItem,
    CertificationItem,
    SocialLinks,
)
from models.document import DocumentType, StoredDocument

__all__ = [
    # Resume
    "ProfileSuggestions",
    "ExperienceItem",
    "EducationItem",
    "ProjectItem",
    "CertificationItem",
    "SocialLinks",
    # Documents
    "DocumentType",
    "StoredDocument",
]
