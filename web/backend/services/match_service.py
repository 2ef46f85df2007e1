#!/usr/bin/env python3
"""
Match service - business logic for scoring and feedback operations.
"""

import logging
from typing import Optional

from core.app_context import AppContext
from database.repository import MatchingRepository
from ..models.requests import ScoreMatchRequest, FeedbackRequest
from ..models.responses import MatchScoreResponse, WeightsResponse, FeedbackResponse
from ..exceptions import InvalidFeedbackException

logger = logging.getLogger(__name__)


class MatchService:
    """Service wrapping the match scorer and weight store for the API."""

    def __init__(self, repo: MatchingRepository, context: AppContext):
        self.repo = repo
        self.context = context

    def _scheme(self, scheme_id: Optional[str]) -> str:
        return scheme_id or self.context.config.matching.weight_scheme

    def score(self, request: ScoreMatchRequest) -> MatchScoreResponse:
        """
        Score a candidate/job pair.

        Refreshed embeddings are committed even though the result itself is
        not persisted; the caller owns match records.
        """
        scorer = self.context.build_scorer(self.repo)
        result = scorer.score_match(request.candidate.to_profile(), request.job.to_profile())
        self.repo.commit()

        logger.info(f"Scored candidate {request.candidate.id} vs job {request.job.id}: {result.match_score}")
        return MatchScoreResponse.from_result(request.candidate.id, request.job.id, result)

    def get_weights(self, scheme_id: Optional[str] = None) -> WeightsResponse:
        store = self.context.build_weight_store(self.repo)
        scheme = self._scheme(scheme_id)
        entries = store.get_weights(scheme)
        weight_set = store.get_weight_set(scheme)
        self.repo.commit()
        return WeightsResponse.build(weight_set, entries)

    def apply_feedback(self, request: FeedbackRequest) -> FeedbackResponse:
        """Nudge the listed factors up (accept) or down (reject)."""
        store = self.context.build_weight_store(self.repo)
        scheme = self._scheme(request.scheme_id)

        adjusted = store.apply_feedback(request.feedback_type, request.factors, scheme_id=scheme)
        if not adjusted:
            raise InvalidFeedbackException(
                f"None of the factors {request.factors} exist in scheme '{scheme}'"
            )
        self.repo.commit()

        entries = store.get_weights(scheme)
        weights = WeightsResponse.build(store.get_weight_set(scheme), entries)
        return FeedbackResponse(
            **weights.model_dump(),
            adjusted_factors=[e.factor for e in adjusted],
            match_id=request.match_id
        )
