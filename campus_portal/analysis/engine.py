from __future__ import annotations

import logging

from campus_portal.schemas.resume import (
    AnalysisResult,
    SectionPresencePayload,
    SectionsPayload,
    SubscoresPayload,
)

from .features import ResumeText, build_feature_vector
from .scorer import score_features
from .suggestions import build_suggestions, dedupe, industry_recommendations
from .utils import normalize_keyword
from .vocabulary import MISSING_KEYWORDS_DISPLAY

logger = logging.getLogger(__name__)


def analyze_text(text: str) -> AnalysisResult:
    doc = ResumeText.from_raw(text)
    features = build_feature_vector(doc)
    card = score_features(features)
    suggestions = build_suggestions(features, card.suggestions)

    logger.debug(
        "resume_text_analyzed words=%s score=%s benchmark=%s mistakes=%s suggestions=%s",
        features.word_count,
        card.score,
        card.benchmark,
        len(card.mistakes),
        len(suggestions),
    )

    return AnalysisResult(
        score=card.score,
        mistakes=dedupe(card.mistakes),
        suggestions=suggestions,
        word_count=features.word_count,
        sections=SectionsPayload(**doc.sections.model_dump()),
        section_presence=SectionPresencePayload(**features.section_presence),
        subscores=SubscoresPayload(**card.subscores.model_dump()),
        benchmark=card.benchmark,
        missing_keywords=features.missing_keywords[:MISSING_KEYWORDS_DISPLAY],
        present_keywords=features.present_keywords,
        present_keywords_normalized=[normalize_keyword(keyword) for keyword in features.present_keywords],
        keyword_match_percent=card.keyword_match_percent,
        section_completion_rate=card.section_completion_rate,
        readability_index=card.readability_index,
        industry_recommendations=industry_recommendations(features.missing_keywords),
    )
