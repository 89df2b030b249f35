from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    rate_limit: str
    rate_limit_enabled: bool
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    upload_root: str
    max_upload_bytes: int
    max_pdf_pages: int
    docx_words_per_page: int
    analysis_delay_seconds: float


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ],
    ),
    cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", True),
    upload_root=_get_env("UPLOAD_ROOT", "uploads") or "uploads",
    max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 5 * 1024 * 1024),
    max_pdf_pages=_get_env_int("MAX_PDF_PAGES", 5),
    docx_words_per_page=_get_env_int("DOCX_WORDS_PER_PAGE", 500),
    analysis_delay_seconds=max(0.0, _get_env_float("ANALYSIS_DELAY_SECONDS", 6.0)),
)

if settings.max_pdf_pages < 1:
    raise RuntimeError("MAX_PDF_PAGES must be at least 1.")

if settings.docx_words_per_page < 1:
    raise RuntimeError("DOCX_WORDS_PER_PAGE must be at least 1.")
