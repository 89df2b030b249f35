from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

from campus_portal.analysis import analyze_text
from campus_portal.core.analysis_cache import AnalysisCache, content_hash
from campus_portal.core.config import settings
from campus_portal.core.errors import InputError, NotFoundError
from campus_portal.parsing.extract import extract_text, validate_document
from campus_portal.parsing.models import ResumeDocument
from campus_portal.schemas.resume import AnalysisResult

logger = logging.getLogger(__name__)

STORED_LINK_PREFIX = "uploads/"


def _short_key(cache_key: str) -> str:
    return cache_key[:12]


def resolve_stored_resume(resume_link: str, *, upload_root: str | Path | None = None) -> Path:
    """Map a profile link such as '/uploads/resume-1.pdf' onto a file inside the upload root.

    The link must come from the authenticated user's profile, never from free client input.
    """
    root = Path(upload_root if upload_root is not None else settings.upload_root).resolve()
    relative = resume_link.strip().lstrip("/\\")
    if relative.startswith(STORED_LINK_PREFIX):
        relative = relative[len(STORED_LINK_PREFIX) :]
    if not relative:
        raise InputError("No resume uploaded and no resume found on profile.")
    candidate = (root / relative).resolve()
    if not candidate.is_relative_to(root):
        raise InputError("Invalid stored resume path.")
    if not candidate.is_file():
        raise NotFoundError("Profile resume file not found on server.")
    return candidate


def load_resume_document(
    *,
    filename: str | None = None,
    content: bytes | None = None,
    content_type: str | None = None,
    resume_link: str | None = None,
    upload_root: str | Path | None = None,
) -> ResumeDocument:
    if content is not None:
        return ResumeDocument(filename=filename or "", content_type=content_type or "", content=content)

    if resume_link and resume_link.strip():
        path = resolve_stored_resume(resume_link, upload_root=upload_root)
        guessed_type, _ = mimetypes.guess_type(path.name)
        return ResumeDocument(filename=path.name, content_type=guessed_type or "", content=path.read_bytes())

    raise InputError("No resume uploaded and no resume found on profile.")


def analyze_resume(document: ResumeDocument, cache: AnalysisCache) -> AnalysisResult:
    """Validate, then serve from cache or run the full analysis pipeline."""
    file_type = validate_document(document)
    cache_key = content_hash(document.content)

    cached = cache.get(cache_key)
    if cached is not None:
        logger.info("resume_analysis_cache_hit cache_key=%s", _short_key(cache_key))
        return cached.model_copy(update={"cached": True})

    extracted = extract_text(document, file_type)
    result = analyze_text(extracted.text).model_copy(
        update={
            "file_type": extracted.file_type,
            "pages": extracted.page_count,
            "cache_key": cache_key,
            "cached": False,
        }
    )
    cache.set(cache_key, result)
    logger.info(
        "resume_analysis_completed cache_key=%s file_type=%s pages=%s words=%s score=%s benchmark=%s",
        _short_key(cache_key),
        extracted.file_type,
        extracted.page_count,
        result.word_count,
        result.score,
        result.benchmark,
    )
    return result
