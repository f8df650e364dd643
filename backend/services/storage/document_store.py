from typing import Optional
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
import hashlib
import logging
import re
import threading

from config import get_settings
from models.document import DocumentType, StoredDocument


logger = logging.getLogger(__name__)

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9_-]+")
_ALLOWED_SUFFIXES = {".pdf", ".docx", ".txt"}


def _safe_component(value: str) -> str:
    """Reduce a value to characters that are safe inside a filename."""
    return _UNSAFE_CHARS_RE.sub("_", value).strip("_")[:64] or "user"


def _user_component(user_id: str) -> str:
    """Filename stem for a user; the hash keeps ids that sanitise alike apart."""
    return f"{_safe_component(user_id)}_{hashlib.sha256(user_id.encode()).hexdigest()[:8]}"


class DocumentStore:
    """Filesystem storage for uploaded resumes/CVs with an in-memory index.

    Thread-safe. Keeps one document per (user, document type); uploading a new
    one replaces the previous file. For production, back the index with the
    user database instead of process memory.
    """

    def __init__(self, upload_dir: str):
        self.upload_dir = Path(upload_dir)
        self._documents: dict[tuple[str, DocumentType], StoredDocument] = {}
        self._lock = threading.Lock()

    def _build_filename(self, user_id: str, doc_type: DocumentType, digest: str, original: str) -> str:
        """Build a collision-resistant name from user, type, timestamp and content hash."""
        suffix = Path(original or "").suffix.lower()
        if suffix not in _ALLOWED_SUFFIXES:
            suffix = ""
        timestamp_ms = int(datetime.now(timezone.utc).timestamp() * 1000)
        return f"{_user_component(user_id)}-{doc_type.value}-{timestamp_ms}-{digest[:16]}{suffix}"

    def save(
        self,
        user_id: str,
        doc_type: DocumentType,
        data: bytes,
        filename: str,
        content_type: str,
    ) -> StoredDocument:
        """Write an uploaded document to disk and record it.

        Args:
            user_id: Owner of the document.
            doc_type: Resume or CV.
            data: Raw file bytes.
            filename: Original filename from the upload.
            content_type: MIME type from the upload.

        Returns:
            The StoredDocument record.
        """
        digest = hashlib.sha256(data).hexdigest()
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        path = self.upload_dir / self._build_filename(user_id, doc_type, digest, filename)
        try:
            path.write_bytes(data)
        except OSError:
            self._remove_file(str(path))
            raise

        document = StoredDocument(
            user_id=user_id,
            doc_type=doc_type,
            path=str(path),
            original_filename=filename or path.name,
            content_type=content_type or "application/octet-stream",
            size=len(data),
            sha256=digest,
        )

        with self._lock:
            previous = self._documents.get((user_id, doc_type))
            self._documents[(user_id, doc_type)] = document

        if previous and previous.path != document.path:
            self._remove_file(previous.path)

        logger.info(f"Stored {doc_type.value} for user {user_id} at {path.name} ({len(data)} bytes)")
        return document

    def get(self, user_id: str, doc_type: DocumentType) -> Optional[StoredDocument]:
        """Get the stored document of a type for a user.

        Returns:
            StoredDocument if one was uploaded, None otherwise.
        """
        with self._lock:
            return self._documents.get((user_id, doc_type))

    def delete(self, user_id: str, doc_type: DocumentType) -> bool:
        """Forget a stored document and remove its file.

        Returns:
            True if deleted, False if not found.
        """
        with self._lock:
            document = self._documents.pop((user_id, doc_type), None)
        if document is None:
            return False
        self._remove_file(document.path)
        return True

    def _remove_file(self, path: str) -> None:
        try:
            Path(path).unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove document file {path}: {e}")


@lru_cache()
def get_document_store() -> DocumentStore:
    """Get the singleton document store instance."""
    return DocumentStore(get_settings().upload_dir)
