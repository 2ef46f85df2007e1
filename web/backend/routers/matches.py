#!/usr/bin/env python3
"""
Match endpoints - score candidate/job pairs and record feedback.
"""

import logging
from fastapi import APIRouter, Depends

from core.app_context import AppContext
from database.repository import MatchingRepository
from ..dependencies import get_repository, get_app_context
from ..services.match_service import MatchService
from ..models.requests import ScoreMatchRequest, FeedbackRequest
from ..models.responses import MatchScoreResponse, FeedbackResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.post("/score", response_model=MatchScoreResponse)
def score_match(
    request: ScoreMatchRequest,
    repo: MatchingRepository = Depends(get_repository),
    context: AppContext = Depends(get_app_context)
):
    """
    Score one candidate against one job.

    Returns the match score with its per-factor breakdown, matching and gap
    skills and an explanation. The result is not stored.
    """
    return MatchService(repo, context).score(request)


@router.post("/feedback", response_model=FeedbackResponse)
def submit_feedback(
    request: FeedbackRequest,
    repo: MatchingRepository = Depends(get_repository),
    context: AppContext = Depends(get_app_context)
):
    """
    Record accept/reject feedback on a match.

    Each listed factor's weight moves by 2 (accept up to 100, reject down to 10).
    """
    return MatchService(repo, context).apply_feedback(request)
