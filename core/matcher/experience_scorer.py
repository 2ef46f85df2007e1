#!/usr/bin/env python3
"""
Experience Scorer - Fit between a candidate's experience and a job's seniority.

Years are extracted heuristically from free text:
1. A number followed by "year"/"yr" ("5 years", "3yrs", "10+ Years" is NOT
   matched because of the "+", falling back to keywords)
2. Seniority keywords: entry/junior -> 1, senior -> 7, lead -> 10
3. Otherwise 3 years

Under-qualification is penalized much harder than over-qualification:
    below band: 100 - 15 * gap, floor 0
    above band: 100 - 5 * excess, floor 70
"""
import re
from typing import Dict, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 50
DEFAULT_YEARS = 3

LEVEL_BANDS: Dict[str, Tuple[int, int]] = {
    'entry': (0, 2),
    'mid': (2, 5),
    'senior': (5, 10),
    'lead': (8, 15),
    'principal': (10, 20),
}
UNKNOWN_LEVEL_BAND = (0, 20)

UNDER_PENALTY_PER_YEAR = 15
OVER_PENALTY_PER_YEAR = 5
OVER_QUALIFIED_FLOOR = 70

_YEARS_PATTERN = re.compile(r'(\d+)\s*(year|yr)', re.IGNORECASE)


def extract_years(text: str) -> int:
    """Extract a year count from free-text experience."""
    match = _YEARS_PATTERN.search(text)
    if match:
        return int(match.group(1))

    text_lower = text.lower()
    if 'entry' in text_lower or 'junior' in text_lower:
        return 1
    if 'senior' in text_lower:
        return 7
    if 'lead' in text_lower:
        return 10

    return DEFAULT_YEARS


def level_band(target_level: str) -> Tuple[int, int]:
    return LEVEL_BANDS.get(target_level.lower(), UNKNOWN_LEVEL_BAND)


class ExperienceScorer:
    """Map experience text and a target seniority level onto a 0-100 score."""

    def score(self, experience_text: Optional[str], target_level: Optional[str]) -> int:
        """
        Score experience fit.

        Args:
            experience_text: Candidate's free-text experience ("5 years", "Senior engineer")
            target_level: Job seniority (entry, mid, senior, lead, principal)

        Returns:
            Fit score 0-100; 50 when either input is missing
        """
        if not experience_text or not target_level:
            return NEUTRAL_SCORE

        years = extract_years(experience_text)
        min_years, max_years = level_band(target_level)

        if min_years <= years <= max_years:
            return 100
        if years < min_years:
            gap = min_years - years
            return max(0, 100 - gap * UNDER_PENALTY_PER_YEAR)

        excess = years - max_years
        return max(OVER_QUALIFIED_FLOOR, 100 - excess * OVER_PENALTY_PER_YEAR)
