import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from campus_portal.analysis.features import HAZARD_LAYOUT, HAZARD_NON_ASCII, FeatureVector  # noqa: E402
from campus_portal.analysis import scorer  # noqa: E402
from campus_portal.analysis.scorer import benchmark_for, readability_index, score_features  # noqa: E402
from campus_portal.analysis.vocabulary import FLAT_SECTION_TERMS, INDUSTRY_KEYWORDS, SCORED_SECTIONS  # noqa: E402


def _features(**overrides) -> FeatureVector:
    values = {
        "word_count": 400,
        "found_sections": list(FLAT_SECTION_TERMS),
        "has_email": True,
        "has_phone": True,
        "has_linkedin": False,
        "has_portfolio": False,
        "action_verb_hits": [],
        "has_quantified_results": True,
        "has_impact_markers": True,
        "tech_skill_hits": [],
        "bullet_line_count": 5,
        "sentence_count": 25,
        "avg_words_per_sentence": 16,
        "has_year_tokens": True,
        "special_char_count": 0,
        "present_keywords": [],
        "missing_keywords": list(INDUSTRY_KEYWORDS),
        "section_presence": {key: False for key in SCORED_SECTIONS},
        "ats_hazards": [HAZARD_NON_ASCII, HAZARD_LAYOUT],
    }
    values.update(overrides)
    return FeatureVector(**values)


def _weak_features(**overrides) -> FeatureVector:
    values = {
        "word_count": 10,
        "found_sections": [],
        "has_email": False,
        "has_phone": False,
        "has_quantified_results": False,
        "has_impact_markers": False,
        "pronoun_hits": ["i"],
        "passive_hits": ["worked on"],
        "bullet_line_count": 0,
        "avg_words_per_sentence": 40,
        "has_year_tokens": False,
        "special_char_count": 60,
    }
    values.update(overrides)
    return _features(**values)


class ScorerTests(unittest.TestCase):
    def test_additive_rules_sum_from_base(self):
        card = score_features(_features())
        # 40 base +10 length +15 sections +5 email +5 phone +10 metrics +10 ats
        self.assertEqual(card.score, 95)
        self.assertEqual(card.benchmark, "A")
        self.assertEqual(card.mistakes, [])

    def test_missing_metrics_is_penalised_twice(self):
        with_metrics = score_features(_features())
        without_metrics = score_features(_features(has_quantified_results=False))
        self.assertEqual(with_metrics.score - without_metrics.score, 20)
        self.assertIn(
            "Critical: No quantifiable results found. "
            "Recruiters look for metrics (%, $, numbers) to measure impact.",
            without_metrics.mistakes,
        )
        self.assertTrue(any(message.startswith("Quantify your achievements!") for message in without_metrics.suggestions))

    def test_score_is_clamped_to_minimum(self):
        card = score_features(_weak_features())
        self.assertEqual(card.score, 20)
        self.assertEqual(card.benchmark, "C")
        self.assertEqual(card.readability_index, 30)

    def test_floor_applies_to_substantive_resumes(self):
        card = score_features(_weak_features(word_count=60))
        self.assertEqual(card.score, 50)
        self.assertEqual(card.keyword_match_percent, 50)
        self.assertEqual(card.readability_index, 50)
        self.assertEqual(card.section_completion_rate, 50)

    def test_section_bonus_is_capped(self):
        presence = {key: True for key in SCORED_SECTIONS}
        card = score_features(_features(section_presence=presence, ats_hazards=[]))
        self.assertEqual(card.subscores.sections, 30)
        self.assertEqual(card.subscores.ats, 20)
        self.assertEqual(card.section_completion_rate, 100)
        self.assertEqual(card.score, 100)

    def test_subscores(self):
        card = score_features(_features(bullet_line_count=0, has_impact_markers=False))
        self.assertEqual(card.subscores.sections, 0)
        self.assertEqual(card.subscores.keywords, 5)
        self.assertEqual(card.subscores.achievements, 5)
        self.assertEqual(card.subscores.formatting, 5)
        self.assertEqual(card.subscores.ats, 10)

        full_keywords = score_features(_features(present_keywords=list(INDUSTRY_KEYWORDS), missing_keywords=[]))
        self.assertEqual(full_keywords.subscores.keywords, 15)
        self.assertEqual(full_keywords.keyword_match_percent, 100)

    def test_pronoun_and_passive_hits_are_grouped(self):
        card = score_features(
            _features(pronoun_hits=["i", "my"], passive_hits=["responsible for", "worked on"], cliche_hits=["synergy"])
        )
        self.assertEqual(card.score, 85)
        self.assertIn("Avoid using first-person pronouns (i, my). Use active voice instead.", card.mistakes)
        self.assertIn('Avoid passive phrases like "responsible for". Use strong action verbs.', card.mistakes)
        self.assertIn(
            'Avoid overused buzzwords like "synergy". Show your skills through examples instead.',
            card.mistakes,
        )

    def test_length_rules(self):
        short = score_features(_features(word_count=120))
        self.assertIn("Resume is too short (under 150 words).", short.mistakes)
        self.assertEqual(short.score, 75)

        long = score_features(_features(word_count=1200))
        self.assertEqual(long.mistakes, [])
        self.assertTrue(any("too long" in message for message in long.suggestions))
        self.assertEqual(long.score, 80)

    def test_missing_critical_section_is_a_mistake(self):
        card = score_features(_features(found_sections=["education", "projects"]))
        self.assertIn("Missing key sections: experience, skills, contact", card.mistakes)
        self.assertIn("Ensure you clearly label sections like: experience, skills, contact.", card.suggestions)

        soft = score_features(_features(found_sections=["education", "experience", "skills"]))
        self.assertFalse(any(message.startswith("Missing key sections") for message in soft.mistakes))

    def test_gap_mistake(self):
        card = score_features(_features(gap=(2015, 2020)))
        self.assertIn(
            "Potential employment/education gap detected between 2015 and 2020. Consider addressing briefly.",
            card.mistakes,
        )

    def test_rule_weights_come_from_scoring_config(self):
        real_lookup = scorer.get_scoring_value
        overrides = {"contact.email_bonus": 0, "metrics.bonus": 0}

        def lookup(path, default=None):
            if path in overrides:
                return overrides[path]
            return real_lookup(path, default)

        with patch.object(scorer, "get_scoring_value", side_effect=lookup):
            card = score_features(_features())
        self.assertEqual(card.score, 80)

    def test_readability_peaks_at_sixteen_words(self):
        self.assertEqual(readability_index(16), 100)
        self.assertEqual(readability_index(26), 50)
        self.assertEqual(readability_index(6), 50)
        self.assertEqual(readability_index(0), 30)

    def test_benchmark_cutoffs(self):
        self.assertEqual(benchmark_for(80), "A")
        self.assertEqual(benchmark_for(79), "B")
        self.assertEqual(benchmark_for(60), "B")
        self.assertEqual(benchmark_for(59), "C")

    def test_benchmark_type_is_shared_with_the_response_schema(self):
        from campus_portal.schemas import resume as resume_schema

        self.assertIs(scorer.Benchmark, resume_schema.Benchmark)


if __name__ == "__main__":
    unittest.main()
