from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from campus_portal.core.scoring import get_scoring_value

from .sections import SectionMap, segment
from .utils import clean_text, round_half_up, substring_hits
from .vocabulary import (
    ACTION_VERBS,
    CLICHES,
    FIRST_PERSON_PRONOUNS,
    FLAT_SECTION_TERMS,
    INDUSTRY_KEYWORDS,
    LINKEDIN_MARKERS,
    PASSIVE_PHRASES,
    PHONE_WORDS,
    PORTFOLIO_MARKERS,
    SCORED_SECTIONS,
    TECH_SKILLS,
    VAGUE_TERMS,
)

EMAIL_RE = re.compile(r"[\w.%+-]+@[\w.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"(?:\+[0-9]{1,3}[-.]?)?\(?[0-9]{3}\)?[-.]?[0-9]{3}[-.]?[0-9]{4}")
QUANTIFIED_RE = re.compile(r"[0-9]%|\$[0-9]|[0-9]+(?:\+|k|m)", re.IGNORECASE)
IMPACT_RE = re.compile(r"%|\$|\b(?:increased|reduced|optimized|saved|improved)\b", re.IGNORECASE)
BULLET_LINE_RE = re.compile(r"^\s*(?:[•\-–·]|[0-9]+\.)\s+", re.MULTILINE)
_BULLET_NO_STOP_RE = re.compile(r"^\s*(?:[•\-–·]|[0-9]+\.)\s+[^.\n]+[a-zA-Z]$", re.MULTILINE)
_BULLET_WITH_STOP_RE = re.compile(r"^\s*(?:[•\-–·]|[0-9]+\.)\s+[^!\n]+[.!]$", re.MULTILINE)
SENTENCE_END_RE = re.compile(r"[.!?]+")
YEAR_RE = re.compile(r"\b(?:19|20)[0-9]{2}\b")
NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
LAYOUT_ARTIFACT_RE = re.compile(r"table|column|page [0-9]", re.IGNORECASE)

HAZARD_NON_ASCII = "Many non-ASCII characters"
HAZARD_LAYOUT = "Potential tables/columns that can confuse ATS"


@dataclass(frozen=True)
class ResumeText:
    """The views of one document every extractor reads from."""

    full: str
    clean: str
    lower: str
    sections: SectionMap

    @classmethod
    def from_raw(cls, text: str) -> "ResumeText":
        raw = text or ""
        cleaned = clean_text(raw)
        return cls(full=raw, clean=cleaned, lower=cleaned.lower(), sections=segment(raw))


class FeatureVector(BaseModel):
    model_config = ConfigDict(frozen=True)

    word_count: int = Field(ge=0)
    found_sections: list[str] = Field(default_factory=list)
    has_email: bool = False
    has_phone: bool = False
    has_linkedin: bool = False
    has_portfolio: bool = False
    action_verb_hits: list[str] = Field(default_factory=list)
    has_quantified_results: bool = False
    has_impact_markers: bool = False
    tech_skill_hits: list[str] = Field(default_factory=list)
    pronoun_hits: list[str] = Field(default_factory=list)
    passive_hits: list[str] = Field(default_factory=list)
    cliche_hits: list[str] = Field(default_factory=list)
    vague_hits: list[str] = Field(default_factory=list)
    bullet_line_count: int = Field(default=0, ge=0)
    inconsistent_bullet_punctuation: bool = False
    sentence_count: int = Field(default=1, ge=1)
    avg_words_per_sentence: int = Field(default=0, ge=0)
    has_year_tokens: bool = False
    gap: tuple[int, int] | None = None
    special_char_count: int = Field(default=0, ge=0)
    present_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    section_presence: dict[str, bool] = Field(default_factory=dict)
    has_projects_section: bool = False
    ats_hazards: list[str] = Field(default_factory=list)

    @property
    def action_verb_count(self) -> int:
        return len(self.action_verb_hits)

    @property
    def present_section_count(self) -> int:
        return sum(1 for present in self.section_presence.values() if present)


def extract_length(doc: ResumeText) -> dict[str, Any]:
    return {"word_count": len(doc.clean.split())}


def extract_flat_sections(doc: ResumeText) -> dict[str, Any]:
    return {"found_sections": substring_hits(doc.lower, FLAT_SECTION_TERMS)}


def extract_contact(doc: ResumeText) -> dict[str, Any]:
    has_phone = bool(PHONE_RE.search(doc.clean)) or bool(substring_hits(doc.lower, PHONE_WORDS))
    return {
        "has_email": bool(EMAIL_RE.search(doc.clean)),
        "has_phone": has_phone,
        "has_linkedin": bool(substring_hits(doc.lower, LINKEDIN_MARKERS)),
        "has_portfolio": bool(substring_hits(doc.lower, PORTFOLIO_MARKERS)),
    }


def extract_action_verbs(doc: ResumeText) -> dict[str, Any]:
    return {"action_verb_hits": substring_hits(doc.lower, ACTION_VERBS)}


def extract_impact(doc: ResumeText) -> dict[str, Any]:
    return {
        "has_quantified_results": bool(QUANTIFIED_RE.search(doc.clean)),
        "has_impact_markers": bool(IMPACT_RE.search(doc.clean)),
    }


def extract_tech_skills(doc: ResumeText) -> dict[str, Any]:
    return {"tech_skill_hits": substring_hits(doc.lower, TECH_SKILLS)}


def extract_negative_signals(doc: ResumeText) -> dict[str, Any]:
    return {
        "pronoun_hits": [pronoun.strip() for pronoun in substring_hits(doc.lower, FIRST_PERSON_PRONOUNS)],
        "passive_hits": substring_hits(doc.lower, PASSIVE_PHRASES),
        "cliche_hits": substring_hits(doc.lower, CLICHES),
        "vague_hits": substring_hits(doc.lower, VAGUE_TERMS),
    }


def extract_structure(doc: ResumeText) -> dict[str, Any]:
    word_count = len(doc.clean.split())
    sentence_count = len(SENTENCE_END_RE.findall(doc.clean)) or 1
    return {
        "bullet_line_count": len(BULLET_LINE_RE.findall(doc.full)),
        "inconsistent_bullet_punctuation": bool(
            _BULLET_NO_STOP_RE.search(doc.full) and _BULLET_WITH_STOP_RE.search(doc.full)
        ),
        "sentence_count": sentence_count,
        "avg_words_per_sentence": round_half_up(word_count / sentence_count),
    }


def extract_dates(doc: ResumeText) -> dict[str, Any]:
    years = sorted(int(token) for token in YEAR_RE.findall(doc.clean))
    gap: tuple[int, int] | None = None
    for previous, current in zip(years, years[1:]):
        if current - previous >= 3:
            gap = (previous, current)
            break
    return {"has_year_tokens": bool(years), "gap": gap}


def extract_ats_hazards(doc: ResumeText) -> dict[str, Any]:
    special_char_count = len(NON_ASCII_RE.findall(doc.clean))
    threshold = int(get_scoring_value("ats.non_ascii_threshold", 50))
    hazards: list[str] = []
    if special_char_count > threshold:
        hazards.append(HAZARD_NON_ASCII)
    if LAYOUT_ARTIFACT_RE.search(doc.full):
        hazards.append(HAZARD_LAYOUT)
    return {"special_char_count": special_char_count, "ats_hazards": hazards}


def extract_keywords(doc: ResumeText) -> dict[str, Any]:
    present = substring_hits(doc.lower, INDUSTRY_KEYWORDS)
    return {
        "present_keywords": present,
        "missing_keywords": [keyword for keyword in INDUSTRY_KEYWORDS if keyword not in present],
    }


def extract_section_presence(doc: ResumeText) -> dict[str, Any]:
    sections = doc.sections
    presence = {key: bool(sections.get(key)) for key in SCORED_SECTIONS}
    presence["achievements"] = bool(sections.achievements or sections.projects)
    return {"section_presence": presence, "has_projects_section": bool(sections.projects)}


EXTRACTORS: tuple[Callable[[ResumeText], dict[str, Any]], ...] = (
    extract_length,
    extract_flat_sections,
    extract_contact,
    extract_action_verbs,
    extract_impact,
    extract_tech_skills,
    extract_negative_signals,
    extract_structure,
    extract_dates,
    extract_ats_hazards,
    extract_keywords,
    extract_section_presence,
)


def build_feature_vector(doc: ResumeText) -> FeatureVector:
    collected: dict[str, Any] = {}
    for extractor in EXTRACTORS:
        collected.update(extractor(doc))
    return FeatureVector(**collected)
