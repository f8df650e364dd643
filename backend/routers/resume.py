from fastapi import APIRouter, UploadFile, File, HTTPException, Depends
from fastapi.responses import FileResponse
from pathlib import Path
from typing import Optional
import logging

from config import Settings, get_settings
from models.document import DocumentType
from schemas.responses import ResumeUploadResponse
from services.auth import get_current_user_id
from services.parser import ResumeParser, UnsupportedFileType
from services.storage import DocumentStore, get_document_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Resume"])


def _ensure_owner(current_user_id: str, user_id: str) -> None:
    if current_user_id != user_id:
        raise HTTPException(
            status_code=403,
            detail="Not authorized to update this profile",
        )


async def _upload_and_parse(
    user_id: str,
    doc_type: DocumentType,
    upload: Optional[UploadFile],
    current_user_id: str,
    store: DocumentStore,
    settings: Settings,
) -> ResumeUploadResponse:
    """Parse an uploaded resume/CV, store the file and return profile suggestions."""
    if upload is None:
        raise HTTPException(status_code=400, detail="Resume file is required")

    _ensure_owner(current_user_id, user_id)

    # Never buffer more than one byte past the limit
    data = await upload.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {settings.max_upload_bytes // (1024 * 1024)} MB",
        )

    try:
        profile = ResumeParser().parse_bytes(data, upload.content_type, upload.filename)
    except UnsupportedFileType:
        raise HTTPException(
            status_code=400,
            detail="Unsupported resume format. Please upload a PDF, DOCX or text file.",
        )
    except Exception:
        logger.exception(f"Error parsing {doc_type.value} for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to parse resume")

    try:
        store.save(user_id, doc_type, data, upload.filename or "", upload.content_type or "")
    except OSError:
        logger.exception(f"Error storing {doc_type.value} for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to store resume")

    if profile.is_empty():
        message = "Resume uploaded, but no profile information could be extracted"
    else:
        message = "Resume parsed successfully"

    return ResumeUploadResponse(
        message=message,
        profile=profile.to_dict(),
        file_url=f"{router.prefix}/{user_id}/download/{doc_type.value}",
    )


@router.post("/{user_id}/upload/{doc_type}", response_model=ResumeUploadResponse)
async def upload_document(
    user_id: str,
    doc_type: DocumentType,
    file: Optional[UploadFile] = File(None),
    resume: Optional[UploadFile] = File(None),
    cv: Optional[UploadFile] = File(None),
    current_user_id: str = Depends(get_current_user_id),
    store: DocumentStore = Depends(get_document_store),
    settings: Settings = Depends(get_settings),
):
    """Upload a resume or CV and get parsed profile suggestions.

    Accepts PDF, DOCX or TXT under the multipart field ``file``, ``resume``
    or ``cv``. Only the profile owner may upload.
    """
    upload = next((u for u in (file, resume, cv) if u is not None), None)
    return await _upload_and_parse(user_id, doc_type, upload, current_user_id, store, settings)


@router.post("/{user_id}/resume", response_model=ResumeUploadResponse)
async def upload_resume(
    user_id: str,
    resume: Optional[UploadFile] = File(None),
    file: Optional[UploadFile] = File(None),
    current_user_id: str = Depends(get_current_user_id),
    store: DocumentStore = Depends(get_document_store),
    settings: Settings = Depends(get_settings),
):
    """Upload a resume under the ``resume`` field (route used by the web client)."""
    return await _upload_and_parse(
        user_id, DocumentType.RESUME, resume if resume is not None else file, current_user_id, store, settings,
    )


@router.get("/{user_id}/download/{doc_type}")
async def download_document(
    user_id: str,
    doc_type: DocumentType,
    current_user_id: str = Depends(get_current_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    """Stream a previously uploaded resume or CV back.

    Any signed-in user may download, so employers can open candidates' files.
    """
    document = store.get(user_id, doc_type)
    if not document:
        raise HTTPException(
            status_code=404,
            detail=f"No {doc_type.value} uploaded for this profile",
        )

    if not Path(document.path).is_file():
        logger.warning(f"Stored {doc_type.value} for user {user_id} is missing on disk: {document.path}")
        raise HTTPException(status_code=404, detail="File not found")

    return FileResponse(
        document.path,
        media_type=document.content_type,
        filename=document.original_filename,
    )


@router.delete("/{user_id}/documents/{doc_type}")
async def delete_document(
    user_id: str,
    doc_type: DocumentType,
    current_user_id: str = Depends(get_current_user_id),
    store: DocumentStore = Depends(get_document_store),
):
    """Remove the owner's stored resume or CV."""
    _ensure_owner(current_user_id, user_id)

    if not store.delete(user_id, doc_type):
        raise HTTPException(
            status_code=404,
            detail=f"No {doc_type.value} uploaded for this profile",
        )

    return {"success": True, "message": f"Stored {doc_type.value} deleted"}
