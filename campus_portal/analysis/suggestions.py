from __future__ import annotations

from collections.abc import Iterable

from campus_portal.core.scoring import get_scoring_value

from .features import FeatureVector
from .vocabulary import MISSING_KEYWORDS_DISPLAY

SECTION_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("summary", "Add a concise Professional Summary (2–3 lines) with role, experience, and 3 strengths."),
    ("experience", "Include Experience entries with 3–5 bullets each using action verbs and measurable results."),
    ("education", "Add an Education section with degree, institution, graduation year, and relevant coursework."),
    ("skills", "List a Skills section grouped by categories (Languages, Frameworks, Tools)."),
    ("certifications", "Add Certifications or relevant courses to strengthen credibility for your target role."),
)
PROJECTS_TEMPLATE = "Include 1–2 Projects highlighting tech stack, your contributions, and outcomes."

HYGIENE_SUGGESTIONS: tuple[str, ...] = (
    "Use a simple, single-column layout with clear headings to maximize ATS parse rate.",
    "Use consistent tense (past for previous roles, present for current), and consistent punctuation.",
    "Place contact info and links (Email, LinkedIn, GitHub) at the top header area.",
)

FALLBACK_POOL: tuple[str, ...] = (
    "Prioritize relevant experience and projects to the target role, move them above less relevant content.",
    "Avoid first‑person pronouns; write bullets that start with action verbs (e.g., Built, Optimized).",
    "Group similar skills; remove outdated technologies unless directly relevant to the role.",
    "Ensure uniform date formats (e.g., Mar 2024 – Present) across all sections.",
    "Keep resume length to 1 page for early career; 1–2 pages for experienced profiles.",
    "Use a professional file name (e.g., firstname_lastname_resume.pdf).",
)

INDUSTRY_RECOMMENDATION_TEMPLATE = "Highlight experience or learning related to {keyword}."


class SuggestionList:
    """Insertion-ordered list that ignores exact-string repeats."""

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        self._seen: set[str] = set()
        for message in initial:
            self.add(message)

    def add(self, message: str) -> bool:
        if message in self._seen:
            return False
        self._items.append(message)
        self._seen.add(message)
        return True

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> list[str]:
        return list(self._items)


def dedupe(messages: Iterable[str]) -> list[str]:
    return SuggestionList(messages).to_list()


def build_suggestions(features: FeatureVector, raised: Iterable[str]) -> list[str]:
    suggestions = SuggestionList(raised)

    for section, template in SECTION_TEMPLATES:
        if not features.section_presence.get(section, False):
            suggestions.add(template)
    if not features.has_projects_section:
        suggestions.add(PROJECTS_TEMPLATE)

    if features.bullet_line_count < 3:
        suggestions.add("Convert dense paragraphs into short bullet points; start each with an action verb.")
    if features.avg_words_per_sentence > 24:
        suggestions.add("Shorten sentences; aim for 12–20 words per sentence to improve readability.")
    if features.missing_keywords:
        top_three = ", ".join(features.missing_keywords[:3])
        suggestions.add(f"Integrate relevant domain keywords thoughtfully in Experience/Projects: {top_three}.")
    if not features.has_quantified_results:
        suggestions.add("Add metrics for impact (e.g., “Improved load time by 35%”, “Reduced costs by $10k”).")
    if features.special_char_count > int(get_scoring_value("ats.non_ascii_threshold", 50)):
        suggestions.add("Use standard ASCII characters and avoid decorative symbols to improve ATS parsing.")

    for message in HYGIENE_SUGGESTIONS:
        suggestions.add(message)

    minimum = int(get_scoring_value("suggestions.minimum", 10))
    for message in FALLBACK_POOL:
        if len(suggestions) >= minimum:
            break
        suggestions.add(message)

    return suggestions.to_list()


def industry_recommendations(missing_keywords: list[str]) -> list[str]:
    return [
        INDUSTRY_RECOMMENDATION_TEMPLATE.format(keyword=keyword)
        for keyword in missing_keywords[:MISSING_KEYWORDS_DISPLAY]
    ]
