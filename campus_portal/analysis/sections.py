from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from .vocabulary import SECTION_HEADERS

_LINE_SPLIT_RE = re.compile(r"\r?\n")


class SectionMap(BaseModel):
    """Text block per logical resume section; empty string means absent."""

    model_config = ConfigDict(frozen=True)

    summary: str = ""
    experience: str = ""
    education: str = ""
    skills: str = ""
    certifications: str = ""
    projects: str = ""
    achievements: str = ""
    contact: str = ""

    def get(self, key: str) -> str:
        return getattr(self, key, "") or ""


def match_section_header(line: str) -> str | None:
    """Return the section key when the line is a header such as 'Work Experience' or 'Skills:'."""
    lowered = line.strip().lower()
    if not lowered:
        return None
    for key, labels in SECTION_HEADERS:
        for label in labels:
            if lowered == label or lowered.startswith(f"{label}:"):
                return key
    return None


def segment(text: str) -> SectionMap:
    buckets: dict[str, list[str]] = {}
    current = "summary"
    for raw_line in _LINE_SPLIT_RE.split(text or ""):
        line = raw_line.strip()
        if not line:
            continue
        header = match_section_header(line)
        if header is not None:
            # Header lines are consumed, including any text after the colon.
            current = header
            continue
        buckets.setdefault(current, []).append(line)

    return SectionMap(**{key: "\n".join(lines).strip() for key, lines in buckets.items()})
