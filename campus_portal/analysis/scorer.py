from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from campus_portal.core.scoring import get_scoring_value
from campus_portal.schemas.resume import Benchmark

from .features import FeatureVector
from .utils import clamp_int, round_half_up
from .vocabulary import (
    ACTION_VERBS,
    CRITICAL_FLAT_SECTIONS,
    FLAT_SECTION_TERMS,
    INDUSTRY_KEYWORDS,
    MISSING_KEYWORDS_DISPLAY,
    SCORED_SECTIONS,
)


class Subscores(BaseModel):
    model_config = ConfigDict(frozen=True)

    sections: int
    keywords: int
    achievements: int
    formatting: int
    ats: int


class ScoreCard(BaseModel):
    """Scorer output. ``suggestions`` holds only what rule evaluation raised."""

    model_config = ConfigDict(frozen=True)

    score: int
    subscores: Subscores
    benchmark: Benchmark
    keyword_match_percent: int = Field(ge=0, le=100)
    section_completion_rate: int = Field(ge=0, le=100)
    readability_index: int = Field(ge=0, le=100)
    mistakes: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


def _cfg_int(path: str, default: int) -> int:
    return int(get_scoring_value(path, default))


def benchmark_for(score: int) -> Benchmark:
    if score >= _cfg_int("benchmark.a_min", 80):
        return "A"
    if score >= _cfg_int("benchmark.b_min", 60):
        return "B"
    return "C"


def section_bonus(features: FeatureVector) -> int:
    per_section = _cfg_int("sections.per_present_bonus", 8)
    return min(features.present_section_count * per_section, _cfg_int("sections.bonus_cap", 30))


def ats_points(features: FeatureVector) -> int:
    max_points = _cfg_int("ats.max_points", 20)
    return max(0, max_points - len(features.ats_hazards) * _cfg_int("ats.points_per_hazard", 5))


def readability_index(avg_words_per_sentence: int) -> int:
    return clamp_int(round_half_up(100 - abs(avg_words_per_sentence - 16) * 5), 30, 100)


def score_features(features: FeatureVector) -> ScoreCard:
    score = _cfg_int("score.base", 40)
    mistakes: list[str] = []
    suggestions: list[str] = []

    min_words = _cfg_int("length.min_words", 150)
    max_words = _cfg_int("length.max_words", 1000)
    if features.word_count < min_words:
        score -= _cfg_int("length.short_penalty", 10)
        mistakes.append(f"Resume is too short (under {min_words} words).")
        suggestions.append(
            "Add more details about your projects, education, and experiences to reach at least 400-600 words."
        )
    elif features.word_count > max_words:
        score -= _cfg_int("length.long_penalty", 5)
        suggestions.append(
            f"Resume might be too long (over {max_words} words). "
            "Try to be more concise and keep it to 1-2 pages."
        )
    else:
        score += _cfg_int("length.in_range_bonus", 10)

    if len(features.found_sections) == len(FLAT_SECTION_TERMS):
        score += _cfg_int("flat_sections.all_found_bonus", 15)
    else:
        missing = [section for section in FLAT_SECTION_TERMS if section not in features.found_sections]
        if any(section in missing for section in CRITICAL_FLAT_SECTIONS):
            mistakes.append(f"Missing key sections: {', '.join(missing)}")
        suggestions.append(f"Ensure you clearly label sections like: {', '.join(missing)}.")
        score += len(features.found_sections) * _cfg_int("flat_sections.per_found_bonus", 2)

    if features.has_email:
        score += _cfg_int("contact.email_bonus", 5)
    else:
        mistakes.append("No email address found.")
        suggestions.append("Add your professional email address clearly at the top.")

    if features.has_phone:
        score += _cfg_int("contact.phone_bonus", 5)
    else:
        suggestions.append("Consider adding a phone number for recruiters to contact you directly.")

    if features.has_linkedin:
        score += _cfg_int("contact.linkedin_bonus", 5)
    else:
        suggestions.append("Add your LinkedIn profile URL to showcase your professional network.")

    if features.has_portfolio:
        score += _cfg_int("contact.portfolio_bonus", 5)
    else:
        suggestions.append(
            "Add a link to your GitHub, Portfolio, or Project repository to demonstrate your work."
        )

    if features.action_verb_count >= _cfg_int("action_verbs.min_hits", 5):
        score += _cfg_int("action_verbs.bonus", 10)
    else:
        suggestions.append(
            "Use strong action verbs to describe your achievements. "
            f"Examples: {', '.join(ACTION_VERBS[:5])}."
        )
        score += features.action_verb_count

    if features.has_quantified_results:
        score += _cfg_int("metrics.bonus", 10)
    else:
        suggestions.append(
            "Quantify your achievements! Use numbers, percentages, or metrics "
            '(e.g., "Increased efficiency by 20%", "Managed team of 5").'
        )

    if len(features.tech_skill_hits) >= _cfg_int("tech_skills.min_hits", 3):
        score += _cfg_int("tech_skills.bonus", 5)
    else:
        suggestions.append(
            "List relevant technical skills or tools you are proficient in "
            "(e.g., Programming languages, Software)."
        )

    if features.pronoun_hits:
        score -= _cfg_int("language.pronoun_penalty", 5)
        mistakes.append(
            f"Avoid using first-person pronouns ({', '.join(features.pronoun_hits)}). Use active voice instead."
        )

    if features.passive_hits:
        score -= _cfg_int("language.passive_penalty", 5)
        mistakes.append(f'Avoid passive phrases like "{features.passive_hits[0]}". Use strong action verbs.')

    if features.cliche_hits:
        mistakes.append(
            f'Avoid overused buzzwords like "{features.cliche_hits[0]}". '
            "Show your skills through examples instead."
        )

    # Second metrics penalty; the first is the withheld bonus above.
    if not features.has_quantified_results:
        mistakes.append(
            "Critical: No quantifiable results found. "
            "Recruiters look for metrics (%, $, numbers) to measure impact."
        )
        score -= _cfg_int("metrics.missing_penalty", 10)

    if features.bullet_line_count == 0:
        suggestions.append("Use concise bullet points under experience and projects instead of long paragraphs.")
        score -= _cfg_int("structure.no_bullets_penalty", 5)

    if features.avg_words_per_sentence > _cfg_int("structure.long_sentence_words", 30):
        suggestions.append("Break down long sentences; aim for 12–20 words per sentence for readability.")
        score -= _cfg_int("structure.long_sentence_penalty", 5)
    elif features.avg_words_per_sentence < _cfg_int("structure.short_sentence_words", 8):
        suggestions.append("Provide more substance in each bullet; very short lines lack context.")

    if not features.has_year_tokens:
        suggestions.append("Include dates for education and experience (e.g., 2023 – 2024).")
        score -= _cfg_int("structure.missing_dates_penalty", 3)

    if features.special_char_count > _cfg_int("ats.non_ascii_threshold", 50):
        suggestions.append("Reduce special symbols and decorative characters to improve ATS parsing.")
        score -= _cfg_int("structure.special_chars_penalty", 3)

    if features.vague_hits:
        suggestions.append("Avoid vague terms like etc/various; be specific about technologies and outcomes.")

    if features.inconsistent_bullet_punctuation:
        suggestions.append("Keep bullet punctuation consistent (either end all bullets with a period or none).")

    if features.gap is not None:
        start, end = features.gap
        mistakes.append(
            f"Potential employment/education gap detected between {start} and {end}. "
            "Consider addressing briefly."
        )

    if features.missing_keywords:
        suggestions.append(
            "Consider adding relevant industry keywords if applicable: "
            f"{', '.join(features.missing_keywords[:MISSING_KEYWORDS_DISPLAY])}."
        )

    sections_points = section_bonus(features)
    score += sections_points
    ats_score = ats_points(features)
    score += ats_score

    score = clamp_int(score, _cfg_int("score.min", 20), _cfg_int("score.max", 100))

    keyword_match_percent = round_half_up(len(features.present_keywords) / len(INDUSTRY_KEYWORDS) * 100)
    section_completion_rate = round_half_up(features.present_section_count / len(SCORED_SECTIONS) * 100)
    readability = readability_index(features.avg_words_per_sentence)

    subscores = Subscores(
        sections=sections_points,
        keywords=clamp_int(15 - min(len(features.missing_keywords), 10), 0, 15),
        achievements=15 if features.has_impact_markers else 5,
        formatting=10 - (5 if features.bullet_line_count == 0 else 0),
        ats=ats_score,
    )

    if features.word_count >= _cfg_int("floor.min_words", 50):
        floor = _cfg_int("floor.value", 50)
        score = max(score, floor)
        keyword_match_percent = max(keyword_match_percent, floor)
        readability = max(readability, floor)
        section_completion_rate = max(section_completion_rate, floor)

    return ScoreCard(
        score=score,
        subscores=subscores,
        benchmark=benchmark_for(score),
        keyword_match_percent=keyword_match_percent,
        section_completion_rate=section_completion_rate,
        readability_index=readability,
        mistakes=mistakes,
        suggestions=suggestions,
    )
