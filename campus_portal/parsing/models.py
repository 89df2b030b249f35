from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ResumeFileType = Literal["pdf", "docx"]


class ResumeDocument(BaseModel):
    """An uploaded or stored resume, owned by a single request."""

    model_config = ConfigDict(frozen=True)

    filename: str = ""
    content_type: str = ""
    content: bytes = Field(repr=False)

    @field_validator("content_type")
    @classmethod
    def _normalize_content_type(cls, value: str) -> str:
        return (value or "").split(";")[0].strip().lower()

    @property
    def extension(self) -> str:
        if "." not in self.filename:
            return ""
        return self.filename.rsplit(".", 1)[-1].strip().lower()


class ExtractedText(BaseModel):
    file_type: ResumeFileType
    text: str
    page_count: int | None = None
