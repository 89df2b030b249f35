from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FileType = Literal["pdf", "docx"]
Benchmark = Literal["A", "B", "C"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SectionsPayload(_CamelModel):
    summary: str = ""
    experience: str = ""
    education: str = ""
    skills: str = ""
    certifications: str = ""
    projects: str = ""
    achievements: str = ""
    contact: str = ""


class SectionPresencePayload(_CamelModel):
    summary: bool = False
    experience: bool = False
    education: bool = False
    skills: bool = False
    certifications: bool = False
    achievements: bool = False


class SubscoresPayload(_CamelModel):
    sections: int
    keywords: int
    achievements: int
    formatting: int
    ats: int


class AnalysisResult(_CamelModel):
    """JSON contract consumed by the resume analyzer page."""

    score: int = Field(ge=20, le=100)
    mistakes: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    word_count: int = Field(ge=0)
    sections: SectionsPayload
    section_presence: SectionPresencePayload
    subscores: SubscoresPayload
    benchmark: Benchmark
    missing_keywords: list[str] = Field(default_factory=list, max_length=8)
    present_keywords: list[str] = Field(default_factory=list)
    present_keywords_normalized: list[str] = Field(default_factory=list)
    keyword_match_percent: int = Field(ge=0, le=100)
    section_completion_rate: int = Field(ge=0, le=100)
    readability_index: int = Field(ge=30, le=100)
    industry_recommendations: list[str] = Field(default_factory=list)
    file_type: FileType | None = None
    pages: int | None = None
    cache_key: str | None = None
    cached: bool = False
