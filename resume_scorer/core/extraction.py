import logging
from typing import Optional

from resume_scorer.config import settings
from resume_scorer.core.docx_extractor import extract_docx_text
from resume_scorer.core.errors import ExtractionError
from resume_scorer.core.pdf_extractor import extract_pdf_text
from resume_scorer.core.schemas import FileType, ParsedDocument
from resume_scorer.core.text_normalization import count_words, normalize_text

logger = logging.getLogger(__name__)

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PDF_CONTENT_TYPE = "application/pdf"
TEXT_CONTENT_TYPES = {"text/plain", "text/markdown"}

ALLOWED_EXTENSIONS = (".pdf", ".docx", ".txt", ".md")


class UploadRejected(ExtractionError):
    """The upload was refused before any extraction was attempted."""

    def __init__(self, message: str, code: str, status_code: int):
        super().__init__(message, code=code)
        self.status_code = status_code


def detect_file_type(filename: str, content_type: str) -> Optional[FileType]:
    """Resolve the file type from the extension first, then the declared content type."""
    name = (filename or "").lower()
    ctype = (content_type or "").lower()

    if name.endswith(".docx") or ctype == DOCX_CONTENT_TYPE:
        return "docx"
    if name.endswith(".pdf") or ctype == PDF_CONTENT_TYPE:
        return "pdf"
    if name.endswith((".txt", ".md")) or ctype in TEXT_CONTENT_TYPES:
        return "txt"
    return None


def validate_upload(filename: str, size: int, content_type: str = "") -> FileType:
    """
    Check an upload before reading its contents.

    Raises UploadRejected with the HTTP status the API should answer with:
      400 empty file, unsafe file name, or file too large
      415 unsupported file type
    """
    name = filename or ""
    if size <= 0:
        raise UploadRejected("Empty file uploaded.", code="INVALID_FILE", status_code=400)

    if ".." in name or "/" in name or "\\" in name:
        raise UploadRejected("Invalid file name.", code="INVALID_FILE", status_code=400)

    if size > settings.max_upload_bytes:
        raise UploadRejected(
            f"File size exceeds {settings.max_upload_mb}MB limit.",
            code="INVALID_FILE",
            status_code=400,
        )

    file_type = detect_file_type(name, content_type)
    if file_type is None:
        raise UploadRejected(
            f"Unsupported content type: {content_type or 'unknown'}. Only PDF, DOCX and TXT files are supported.",
            code="UNSUPPORTED_FILE_TYPE",
            status_code=415,
        )
    return file_type


def extract_text(raw: bytes, file_type: FileType) -> str:
    if file_type == "docx":
        return extract_docx_text(raw)
    if file_type == "pdf":
        return extract_pdf_text(raw)
    return raw.decode("utf-8", errors="replace")


def extract_document(raw: bytes, filename: str, content_type: str = "") -> ParsedDocument:
    """
    Turn uploaded bytes into the ParsedDocument the scoring core consumes.
    Sections are left unset so the core detects them itself.
    """
    file_type = validate_upload(filename, len(raw), content_type)
    text = normalize_text(extract_text(raw, file_type))
    logger.debug(f"Extracted {len(text)} characters from {file_type} upload '{filename}'")
    return ParsedDocument(text=text, word_count=count_words(text), file_type=file_type)
