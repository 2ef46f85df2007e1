#!/usr/bin/env python3
"""
Keyword Matcher - Skill overlap between a candidate and a job posting.

Two skills match when, after lowercasing and trimming, either one contains the
other. The test is deliberately loose so that phrasing differences such as
"React" vs "React.js" still match. It also means "Java" matches "JavaScript";
that false positive is accepted and relied upon.

Score formula:
    required_score  = 100 * matched_required / len(required)   (100 if none)
    preferred_score = 100 * matched_preferred / len(preferred) (100 if none)
    score = 0.7 * required_score + 0.3 * preferred_score
"""

from typing import List, Optional, Sequence
import logging

from core.matcher.models import KeywordMatchResult

logger = logging.getLogger(__name__)

REQUIRED_SHARE = 0.7
PREFERRED_SHARE = 0.3


def normalize_skill(skill: str) -> str:
    return skill.lower().strip()


def skills_match(left: str, right: str) -> bool:
    """Symmetric containment test on already-normalized skills."""
    return left in right or right in left


def _has_match(skill: str, normalized_pool: List[str]) -> bool:
    normalized = normalize_skill(skill)
    return any(skills_match(normalized, other) for other in normalized_pool)


def _coverage_score(job_skills: Sequence[str], normalized_candidate: List[str]) -> float:
    """Percentage of job skills covered by the candidate; vacuously 100."""
    if not job_skills:
        return 100.0
    covered = sum(1 for skill in job_skills if _has_match(skill, normalized_candidate))
    return covered / len(job_skills) * 100


class KeywordMatcher:
    """Weighted skill-overlap scorer."""

    def match(
        self,
        candidate_skills: Optional[Sequence[str]],
        required_skills: Optional[Sequence[str]],
        preferred_skills: Optional[Sequence[str]]
    ) -> KeywordMatchResult:
        """
        Compare candidate skills against the job's required and preferred skills.

        Original casing is preserved in the returned lists; normalization only
        applies to comparisons. Duplicates are kept as given.

        Args:
            candidate_skills: Skills listed on the candidate profile
            required_skills: Skills the job requires
            preferred_skills: Skills the job prefers

        Returns:
            KeywordMatchResult with score (0-100), matching candidate skills
            and gap job skills (required first, then preferred)
        """
        candidate_skills = list(candidate_skills or [])
        required_skills = list(required_skills or [])
        preferred_skills = list(preferred_skills or [])

        normalized_candidate = [normalize_skill(s) for s in candidate_skills]
        job_skills = required_skills + preferred_skills
        normalized_job = [normalize_skill(s) for s in job_skills]

        matching = [s for s in candidate_skills if _has_match(s, normalized_job)]
        gaps = [s for s in job_skills if not _has_match(s, normalized_candidate)]

        required_score = _coverage_score(required_skills, normalized_candidate)
        preferred_score = _coverage_score(preferred_skills, normalized_candidate)
        score = required_score * REQUIRED_SHARE + preferred_score * PREFERRED_SHARE

        logger.debug(
            f"Keyword match: required={required_score:.1f}, preferred={preferred_score:.1f}, "
            f"matching={len(matching)}, gaps={len(gaps)}"
        )

        return KeywordMatchResult(score=score, matching=matching, gaps=gaps)
