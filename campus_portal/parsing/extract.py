from __future__ import annotations

import logging
import math
from io import BytesIO
from zipfile import BadZipFile, ZipFile

from campus_portal.core.config import settings
from campus_portal.core.errors import (
    ExtractionError,
    InputError,
    PageLimitExceededError,
    UnsupportedFormatError,
)

from .models import ExtractedText, ResumeDocument, ResumeFileType

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME = "application/msword"

PDF_MAGIC = b"%PDF-"
ZIP_MAGICS = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")


def _is_zip_payload(content: bytes) -> bool:
    return any(content.startswith(prefix) for prefix in ZIP_MAGICS)


def _zip_has_paths(content: bytes, prefixes: tuple[str, ...]) -> bool:
    try:
        with ZipFile(BytesIO(content)) as archive:
            names = archive.namelist()
    except BadZipFile:
        return False
    return any(any(name.startswith(prefix) for prefix in prefixes) for name in names)


def resolve_file_type(document: ResumeDocument) -> ResumeFileType:
    ext = document.extension
    mime = document.content_type

    if ext == "doc" or DOC_MIME in mime:
        raise UnsupportedFormatError("DOC format is not supported for analysis. Please convert to PDF or DOCX.")
    if ext == "pdf" or PDF_MIME in mime:
        return "pdf"
    if ext == "docx" or DOCX_MIME in mime:
        return "docx"
    if not ext and not mime:
        return "pdf"
    raise UnsupportedFormatError("Unsupported file format.")


def validate_document(document: ResumeDocument) -> ResumeFileType:
    """Check format and file signature. Runs before the content is hashed."""
    if len(document.content) > settings.max_upload_bytes:
        raise InputError(
            f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            status_code=413,
        )

    file_type = resolve_file_type(document)
    if file_type == "pdf" and not document.content.startswith(PDF_MAGIC):
        raise InputError("File signature does not match .pdf content.")
    if file_type == "docx" and (
        not _is_zip_payload(document.content) or not _zip_has_paths(document.content, ("word/",))
    ):
        raise InputError("File signature does not match .docx content.")
    return file_type


def _extract_pdf(content: bytes) -> ExtractedText:
    from pypdf import PdfReader

    try:
        reader = PdfReader(BytesIO(content))
        page_count = len(reader.pages)
    except Exception as exc:
        logger.warning("resume_extraction_failed file_type=pdf: %s", exc)
        raise ExtractionError("Unable to extract text from this PDF file.") from exc

    if page_count > settings.max_pdf_pages:
        raise PageLimitExceededError(f"PDF page limit exceeded (max {settings.max_pdf_pages} pages).")

    try:
        page_chunks = [(page.extract_text() or "") for page in reader.pages]
    except Exception as exc:
        logger.warning("resume_extraction_failed file_type=pdf: %s", exc)
        raise ExtractionError("Unable to extract text from this PDF file.") from exc

    return ExtractedText(file_type="pdf", text="\n".join(page_chunks), page_count=page_count or None)


def _extract_docx(content: bytes) -> ExtractedText:
    from docx import Document

    try:
        document = Document(BytesIO(content))
        text = "\n".join(paragraph.text for paragraph in document.paragraphs)
    except Exception as exc:
        logger.warning("resume_extraction_failed file_type=docx: %s", exc)
        raise ExtractionError("Unable to extract text from this Word document.") from exc

    approx_pages = math.ceil(len(text.split()) / settings.docx_words_per_page)
    if approx_pages > settings.max_pdf_pages:
        raise PageLimitExceededError(
            f"DOCX length appears to exceed {settings.max_pdf_pages} pages (approx). Please shorten your resume."
        )
    return ExtractedText(file_type="docx", text=text, page_count=None)


def extract_text(document: ResumeDocument, file_type: ResumeFileType | None = None) -> ExtractedText:
    resolved = file_type or validate_document(document)
    if resolved == "pdf":
        return _extract_pdf(document.content)
    return _extract_docx(document.content)
