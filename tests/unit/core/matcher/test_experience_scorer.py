#!/usr/bin/env python3
"""
Test ExperienceScorer and year extraction.
"""
import unittest

from core.matcher.experience_scorer import (
    ExperienceScorer, extract_years, level_band, NEUTRAL_SCORE, UNKNOWN_LEVEL_BAND
)


class TestExtractYears(unittest.TestCase):
    """Test heuristic year extraction from free text."""

    def test_number_followed_by_years(self):
        self.assertEqual(extract_years("5 years of backend work"), 5)

    def test_abbreviated_and_no_space(self):
        self.assertEqual(extract_years("3yrs in fintech"), 3)

    def test_case_insensitive(self):
        self.assertEqual(extract_years("12 YEARS"), 12)

    def test_first_number_wins(self):
        self.assertEqual(extract_years("4 years Python, 2 years Go"), 4)

    def test_plus_sign_falls_back_to_keywords(self):
        """'10+ years' does not match the number pattern."""
        self.assertEqual(extract_years("10+ years as a senior engineer"), 7)

    def test_junior_keyword(self):
        self.assertEqual(extract_years("Junior developer"), 1)

    def test_entry_keyword(self):
        self.assertEqual(extract_years("entry level analyst"), 1)

    def test_senior_keyword(self):
        self.assertEqual(extract_years("Senior engineer"), 7)

    def test_lead_keyword(self):
        self.assertEqual(extract_years("Tech Lead"), 10)

    def test_default_when_nothing_recognized(self):
        self.assertEqual(extract_years("Worked at several startups"), 3)


class TestLevelBand(unittest.TestCase):

    def test_known_levels(self):
        self.assertEqual(level_band("entry"), (0, 2))
        self.assertEqual(level_band("mid"), (2, 5))
        self.assertEqual(level_band("senior"), (5, 10))
        self.assertEqual(level_band("lead"), (8, 15))
        self.assertEqual(level_band("principal"), (10, 20))

    def test_level_is_case_insensitive(self):
        self.assertEqual(level_band("Senior"), (5, 10))

    def test_unknown_level(self):
        self.assertEqual(level_band("staff"), UNKNOWN_LEVEL_BAND)


class TestExperienceScorer(unittest.TestCase):

    def setUp(self):
        self.scorer = ExperienceScorer()

    def test_within_band(self):
        self.assertEqual(self.scorer.score("5 years", "senior"), 100)

    def test_band_edges_are_inclusive(self):
        self.assertEqual(self.scorer.score("2 years", "mid"), 100)
        self.assertEqual(self.scorer.score("10 years", "senior"), 100)

    def test_under_qualified(self):
        self.assertEqual(self.scorer.score("1 year", "senior"), 40)

    def test_under_qualified_floor(self):
        self.assertEqual(self.scorer.score("0 years", "principal"), 0)

    def test_over_qualified(self):
        self.assertEqual(self.scorer.score("15 years", "senior"), 75)

    def test_over_qualified_floor(self):
        self.assertEqual(self.scorer.score("30 years", "entry"), 70)

    def test_missing_experience_is_neutral(self):
        self.assertEqual(self.scorer.score(None, "senior"), NEUTRAL_SCORE)
        self.assertEqual(self.scorer.score("", "senior"), NEUTRAL_SCORE)

    def test_missing_level_is_neutral(self):
        self.assertEqual(self.scorer.score("5 years", None), NEUTRAL_SCORE)

    def test_unknown_level_accepts_wide_range(self):
        self.assertEqual(self.scorer.score("18 years", "staff"), 100)

    def test_keyword_fallback(self):
        self.assertEqual(self.scorer.score("Senior engineer", "senior"), 100)
        self.assertEqual(self.scorer.score("Junior developer", "senior"), 40)


if __name__ == '__main__':
    unittest.main()
