#!/usr/bin/env python3
"""
Match Scoring Service - Composite candidate/job match score.

Blends three sub-scores (0-100 each) by tunable weights:
- Semantic: cosine similarity of candidate and job embeddings, times 100
- Keyword: weighted skill overlap (70% required, 30% preferred)
- Experience: years-of-experience fit against the job's seniority band

    contribution[f] = score[f] * weight[f] / sum(weights)
    match_score     = round(sum(contributions))

The semantic score is the raw cosine times 100 and is not clamped; a weakly
negative similarity pulls the blend down. Only the final match score is
clamped to 0-100.

Scoring has no side effects apart from refreshing stale cached embeddings.
Persisting the result is the caller's job (see core.matcher.batch).
"""

from typing import Optional
import logging
import math

from core.matcher.embedding_store import EmbeddingProvider
from core.matcher.exceptions import MatchingError
from core.matcher.experience_scorer import ExperienceScorer
from core.matcher.explainability import generate_explanation
from core.matcher.keyword_matcher import KeywordMatcher
from core.matcher.models import (
    CandidateProfile, JobProfile, MatchResult, MatchMetadata, ScoreBreakdown,
    ENTITY_JOB_SEEKER, ENTITY_JOB, FACTORS, FACTOR_LABELS,
    FACTOR_SEMANTIC, FACTOR_KEYWORD, FACTOR_EXPERIENCE
)
from core.matcher.similarity import cosine_similarity
from core.matcher.text_builder import build_candidate_text, build_job_text
from core.matcher.weights import WeightSet, WeightStore, DEFAULT_SCHEME

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 upwards (2.5 -> 3), unlike Python's banker's rounding."""
    return int(math.floor(value + 0.5))


class MatchScorer:
    """
    Orchestrates the embedding provider, keyword matcher and experience
    scorer into one explainable match score.
    """

    def __init__(
        self,
        embeddings: EmbeddingProvider,
        weight_store: Optional[WeightStore] = None,
        keyword_matcher: Optional[KeywordMatcher] = None,
        experience_scorer: Optional[ExperienceScorer] = None,
        scheme_id: str = DEFAULT_SCHEME
    ):
        self.embeddings = embeddings
        self.weight_store = weight_store
        self.keyword_matcher = keyword_matcher or KeywordMatcher()
        self.experience_scorer = experience_scorer or ExperienceScorer()
        self.scheme_id = scheme_id

    def current_weights(self) -> WeightSet:
        """Snapshot of the configured scheme, or the defaults without a store."""
        if self.weight_store is None:
            return WeightSet.defaults(self.scheme_id)
        return self.weight_store.get_weight_set(self.scheme_id)

    def score_match(
        self,
        candidate: CandidateProfile,
        job: JobProfile,
        weights: Optional[WeightSet] = None
    ) -> MatchResult:
        """
        Score one candidate against one job.

        Args:
            candidate: Candidate profile
            job: Job profile
            weights: Weight snapshot to blend with; read from the weight
                store (scheme ``match_algorithm`` by default) when omitted

        Returns:
            MatchResult with scores, skills, explanation and breakdown

        Raises:
            ProviderError: If an embedding could not be generated
            DimensionMismatch: If the two embeddings differ in length
        """
        if weights is None:
            weights = self.current_weights()

        candidate_text = build_candidate_text(candidate)
        job_text = build_job_text(job)

        candidate_vec, job_vec = self.embeddings.get_or_refresh_many([
            (ENTITY_JOB_SEEKER, str(candidate.id), candidate_text),
            (ENTITY_JOB, str(job.id), job_text),
        ])

        semantic_score = cosine_similarity(candidate_vec, job_vec) * 100

        keyword_result = self.keyword_matcher.match(
            candidate.skills, job.required_skills, job.preferred_skills
        )

        experience_score = self.experience_scorer.score(
            candidate.experience_text, job.experience_level
        )

        scores = {
            FACTOR_SEMANTIC: semantic_score,
            FACTOR_KEYWORD: keyword_result.score,
            FACTOR_EXPERIENCE: float(experience_score),
        }
        factor_weights = {factor: weights.weight_for(factor) for factor in FACTORS}
        total_weight = sum(factor_weights.values())
        if total_weight <= 0:
            raise MatchingError(f"Weights of scheme '{weights.scheme_id}' sum to {total_weight}")

        breakdown = [
            ScoreBreakdown(
                factor=factor,
                label=FACTOR_LABELS[factor],
                score=round_half_up(scores[factor]),
                weight=factor_weights[factor],
                contribution=scores[factor] * factor_weights[factor] / total_weight
            )
            for factor in FACTORS
        ]

        raw_score = round_half_up(sum(b.contribution for b in breakdown))
        match_score = max(0, min(100, raw_score))
        if match_score != raw_score:
            logger.warning(f"Match score {raw_score} for {candidate.id}/{job.id} clamped to {match_score}")

        explanation = generate_explanation(match_score, keyword_result.matching, keyword_result.gaps)

        logger.debug(
            f"Scored candidate {candidate.id} vs job {job.id}: match={match_score} "
            f"(semantic={semantic_score:.1f}, keyword={keyword_result.score:.1f}, "
            f"experience={experience_score}, weights v{weights.version})"
        )

        return MatchResult(
            match_score=match_score,
            semantic_score=round_half_up(semantic_score),
            keyword_score=round_half_up(keyword_result.score),
            experience_score=experience_score,
            matching_skills=keyword_result.matching,
            gap_skills=keyword_result.gaps,
            explanation=explanation,
            breakdown=breakdown,
            metadata=MatchMetadata(
                strengths=list(keyword_result.matching),
                concerns=list(keyword_result.gaps)
            )
        )
