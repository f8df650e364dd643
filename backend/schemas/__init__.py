from schemas.responses import (
    ErrorResponse,
    ResumeUploadResponse,
    HealthResponse,
)

__all__ = [
    "ErrorResponse",
    "ResumeUploadResponse",
    "HealthResponse",
]
