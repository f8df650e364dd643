"""File readers for PDF, DOCX and plain-text resume uploads."""

import io
import logging
import re
import zipfile
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

import pdfplumber
import PyPDF2

from .models import FileType


logger = logging.getLogger(__name__)


DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class ResumeParserError(Exception):
    """Base error for resume reading failures."""


class UnsupportedFileType(ResumeParserError):
    """Raised when an upload is neither PDF, DOCX nor text."""


class ResumeReadError(ResumeParserError):
    """Raised when an upload of a supported type cannot be decoded."""


def clean_extracted_text(text: str) -> str:
    """Clean up text extracted from PDF/DOCX files.

    Removes common artifacts from PDF extraction:
    - Page numbers and footers
    - Lines made only of separators
    - Runs of spaces and blank lines

    Args:
        text: Raw extracted text

    Returns:
        Cleaned text
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n").replace("\u00a0", " ")
    cleaned_lines = []

    for line in text.split("\n"):
        line = line.strip()

        if not line:
            if cleaned_lines and cleaned_lines[-1] != "":
                cleaned_lines.append("")
            continue

        # Standalone page numbers: "1 / 2", "Page 3", "Page 3 of 4"
        if re.match(r"^\d+\s*/\s*\d+$", line) or re.match(r"^Page\s+\d+(?:\s+of\s+\d+)?$", line, re.IGNORECASE):
            continue

        # Separator lines made of pipes, dashes or underscores
        if re.match(r"^[|_\-=\s]+$", line):
            continue

        line = re.sub(r"\|{2,}", " | ", line)
        cleaned_lines.append(line)

    result = "\n".join(cleaned_lines)
    result = re.sub(r"\n{3,}", "\n\n", result)
    result = re.sub(r"[ \t]{2,}", " ", result)

    return result.strip()


def detect_file_type(content_type: Optional[str], filename: Optional[str] = None) -> Optional[FileType]:
    """Detect upload type from its declared MIME type, then its extension.

    Args:
        content_type: MIME type sent with the upload
        filename: Original filename

    Returns:
        FileType enum or None if unsupported
    """
    ctype = (content_type or "").split(";")[0].strip().lower()

    if ctype == "application/pdf":
        return FileType.PDF
    if ctype == DOCX_CONTENT_TYPE:
        return FileType.DOCX
    if ctype.startswith("text/"):
        return FileType.TXT

    ext = Path(filename or "").suffix.lower()
    if ext == ".pdf":
        return FileType.PDF
    elif ext == ".docx":
        return FileType.DOCX
    elif ext == ".txt":
        return FileType.TXT

    return None


def extract_text_from_pdf(data: bytes) -> str:
    """Extract text from PDF bytes.

    Uses PyPDF2 as primary extractor, falls back to pdfplumber.

    Raises:
        ResumeReadError: If neither library can read the document
    """
    try:
        reader = PyPDF2.PdfReader(io.BytesIO(data))
        text = "\n".join((page.extract_text() or "") for page in reader.pages)
        if text.strip():
            return text
        logger.info("PyPDF2 extracted no text, trying pdfplumber")
    except Exception as e:
        logger.warning(f"PyPDF2 failed: {e}, trying pdfplumber")

    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            return "\n".join((page.extract_text() or "") for page in pdf.pages)
    except Exception as e:
        logger.error(f"Error extracting text from PDF: {e}")
        raise ResumeReadError("Could not read PDF document") from e


def extract_text_from_docx(data: bytes) -> str:
    """Extract text from DOCX bytes.

    A DOCX is a ZIP archive; paragraphs are read from word/document.xml.

    Raises:
        ResumeReadError: If the archive or its XML is malformed
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as z:
            if "word/document.xml" not in z.namelist():
                raise ResumeReadError("DOCX is missing word/document.xml")
            xml_content = z.read("word/document.xml")
    except zipfile.BadZipFile as e:
        raise ResumeReadError("File is not a valid DOCX archive") from e

    try:
        tree = ET.fromstring(xml_content)
    except ET.ParseError as e:
        logger.error(f"Failed to parse DOCX XML: {e}")
        raise ResumeReadError("Could not read DOCX document") from e

    # WordprocessingML namespace
    ns = {"w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main"}
    paragraphs = []
    for p in tree.iter(f"{{{ns['w']}}}p"):
        texts = [t.text for t in p.findall(".//w:t", ns) if t.text]
        paragraphs.append("".join(texts))
    return "\n".join(paragraphs)


def extract_text_from_txt(data: bytes) -> str:
    """Decode plain-text bytes, falling back to latin-1."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.info("Upload is not valid UTF-8, decoding as latin-1")
        return data.decode("latin-1")


def extract_text(data: bytes, content_type: Optional[str], filename: Optional[str] = None, clean: bool = True) -> str:
    """Extract text from an uploaded document.

    Args:
        data: Raw upload bytes
        content_type: Declared MIME type
        filename: Original filename, used when the MIME type is generic
        clean: Whether to clean up PDF artifacts (default True)

    Returns:
        Extracted text (possibly empty)

    Raises:
        UnsupportedFileType: If the upload is not PDF, DOCX or text
        ResumeReadError: If the document cannot be decoded
    """
    file_type = detect_file_type(content_type, filename)

    if file_type is None:
        raise UnsupportedFileType(f"Unsupported file type: {content_type or filename}")

    if file_type == FileType.PDF:
        text = extract_text_from_pdf(data)
    elif file_type == FileType.DOCX:
        text = extract_text_from_docx(data)
    else:
        text = extract_text_from_txt(data)

    if clean and text:
        text = clean_extracted_text(text)

    return text
