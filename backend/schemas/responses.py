from pydantic import BaseModel
from typing import Optional

from models.resume import ProfileSuggestions


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    message: str


class ResumeUploadResponse(BaseModel):
    """Response after uploading and parsing a resume/CV."""
    success: bool = True
    message: str
    profile: ProfileSuggestions
    file_url: Optional[str] = None


class HealthResponse(BaseModel):
    route: str
    data: dict[str, str]
