import asyncio

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile, status

from campus_portal.core.analysis_cache import AnalysisCache, get_default_analysis_cache
from campus_portal.core.config import settings
from campus_portal.core.errors import ResumeAnalysisError
from campus_portal.core.rate_limit import rate_limit
from campus_portal.schemas.resume import AnalysisResult
from campus_portal.services.resume_service import analyze_resume, load_resume_document

router = APIRouter()

READ_CHUNK_BYTES = 1024 * 64


def get_analysis_cache() -> AnalysisCache:
    return get_default_analysis_cache()


def get_analysis_delay() -> float:
    return settings.analysis_delay_seconds


async def _read_upload(file: UploadFile) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/resume/analyze", response_model=AnalysisResult)
@rate_limit()
async def analyze_resume_upload(
    request: Request,
    resume: UploadFile | None = File(default=None),
    resume_link: str | None = Form(default=None),
    cache: AnalysisCache = Depends(get_analysis_cache),
    delay_seconds: float = Depends(get_analysis_delay),
):
    _ = request
    content = await _read_upload(resume) if resume is not None else None
    try:
        document = load_resume_document(
            filename=resume.filename if resume is not None else None,
            content=content,
            content_type=resume.content_type if resume is not None else None,
            resume_link=resume_link,
        )
        result = analyze_resume(document, cache)
    except ResumeAnalysisError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc

    # Hits and misses are held to the same latency.
    if delay_seconds > 0:
        await asyncio.sleep(delay_seconds)
    return result
