from enum import Enum
from pydantic import BaseModel, Field
from datetime import datetime, timezone


class DocumentType(Enum):
    """Kinds of documents a job seeker can attach to a profile."""
    RESUME = "resume"
    CV = "cv"


class StoredDocument(BaseModel):
    """An uploaded resume/CV kept on disk for later download."""
    user_id: str
    doc_type: DocumentType
    path: str
    original_filename: str
    content_type: str
    size: int
    sha256: str
    uploaded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
