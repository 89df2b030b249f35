import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from campus_portal.analysis.features import (  # noqa: E402
    HAZARD_LAYOUT,
    HAZARD_NON_ASCII,
    ResumeText,
    build_feature_vector,
    extract_ats_hazards,
    extract_contact,
    extract_dates,
    extract_keywords,
    extract_negative_signals,
    extract_section_presence,
    extract_structure,
    extract_tech_skills,
)
from campus_portal.analysis.vocabulary import INDUSTRY_KEYWORDS  # noqa: E402


def _doc(text: str) -> ResumeText:
    return ResumeText.from_raw(text)


class FeatureExtractorTests(unittest.TestCase):
    def test_empty_text_degrades_to_zero_counts(self):
        features = build_feature_vector(_doc(""))
        self.assertEqual(features.word_count, 0)
        self.assertEqual(features.sentence_count, 1)
        self.assertEqual(features.avg_words_per_sentence, 0)
        self.assertEqual(features.bullet_line_count, 0)
        self.assertEqual(features.found_sections, [])
        self.assertEqual(features.ats_hazards, [])
        self.assertEqual(features.present_keywords, [])
        self.assertEqual(features.missing_keywords, list(INDUSTRY_KEYWORDS))
        self.assertFalse(any(features.section_presence.values()))

    def test_clean_text_collapses_whitespace(self):
        doc = _doc("  Alpha\n\nBeta\t Gamma  ")
        self.assertEqual(doc.clean, "Alpha Beta Gamma")
        self.assertEqual(doc.lower, "alpha beta gamma")

    def test_contact_signals(self):
        found = extract_contact(_doc("reach me at a.b+c@uni.edu or (555)123-4567, linkedin.com/in/ab"))
        self.assertTrue(found["has_email"])
        self.assertTrue(found["has_phone"])
        self.assertTrue(found["has_linkedin"])
        self.assertFalse(found["has_portfolio"])

        words_only = extract_contact(_doc("Mobile: on request. See my Behance.net page"))
        self.assertFalse(words_only["has_email"])
        self.assertTrue(words_only["has_phone"])
        self.assertTrue(words_only["has_portfolio"])

    def test_tech_skills_use_plain_substring_matching(self):
        hits = extract_tech_skills(_doc("Wrote JavaScript daily"))["tech_skill_hits"]
        self.assertIn("java", hits)
        self.assertIn("javascript", hits)

    def test_negative_signals_record_specific_hits(self):
        found = extract_negative_signals(
            _doc("Summary. I was responsible for builds and my team player attitude helped with various tasks")
        )
        self.assertEqual(found["pronoun_hits"], ["i", "my"])
        self.assertEqual(found["passive_hits"], ["responsible for", "helped with"])
        self.assertEqual(found["cliche_hits"], ["team player"])
        self.assertEqual(found["vague_hits"], ["various", "responsible for"])

    def test_structure_counts_bullets_and_sentences(self):
        text = "- Built an API.\n• Led a team\n1. Shipped v2\nnot a bullet\n-nospace"
        found = extract_structure(_doc(text))
        self.assertEqual(found["bullet_line_count"], 3)
        self.assertTrue(found["inconsistent_bullet_punctuation"])
        self.assertEqual(found["sentence_count"], 2)
        self.assertEqual(found["avg_words_per_sentence"], 8)

    def test_consistent_bullet_punctuation_is_not_flagged(self):
        found = extract_structure(_doc("- Built an API.\n- Led a team."))
        self.assertFalse(found["inconsistent_bullet_punctuation"])

    def test_dates_detect_first_gap(self):
        found = extract_dates(_doc("Intern 2015 - 2016, Engineer 2020 - 2021, Lead 2025"))
        self.assertTrue(found["has_year_tokens"])
        self.assertEqual(set(found), {"has_year_tokens", "gap"})
        self.assertNotIn("years", build_feature_vector(_doc("Intern 2015 - 2016")).model_dump())
        self.assertEqual(found["gap"], (2016, 2020))

        no_years = extract_dates(_doc("Room 1850 and code 30200"))
        self.assertFalse(no_years["has_year_tokens"])
        self.assertIsNone(no_years["gap"])

    def test_ats_hazards(self):
        decorated = extract_ats_hazards(_doc("★" * 51))
        self.assertEqual(decorated["special_char_count"], 51)
        self.assertEqual(decorated["ats_hazards"], [HAZARD_NON_ASCII])

        paginated = extract_ats_hazards(_doc("Experience\nPage 1 of 2\nTable of skills"))
        self.assertEqual(paginated["ats_hazards"], [HAZARD_LAYOUT])

        clean = extract_ats_hazards(_doc("Plain resume text"))
        self.assertEqual(clean["ats_hazards"], [])

    def test_keyword_coverage(self):
        found = extract_keywords(_doc("Skills: REST API, Docker, Kubernetes"))
        self.assertEqual(found["present_keywords"], ["api", "docker", "kubernetes", "rest"])
        self.assertEqual(len(found["missing_keywords"]), len(INDUSTRY_KEYWORDS) - 4)
        self.assertNotIn("docker", found["missing_keywords"])

    def test_section_presence_counts_projects_as_achievements(self):
        found = extract_section_presence(_doc("Projects\nPortal for placements"))
        self.assertTrue(found["section_presence"]["achievements"])
        self.assertTrue(found["has_projects_section"])
        self.assertFalse(found["section_presence"]["summary"])
        self.assertEqual(
            sorted(found["section_presence"]),
            sorted(["summary", "experience", "education", "skills", "certifications", "achievements"]),
        )


if __name__ == "__main__":
    unittest.main()
