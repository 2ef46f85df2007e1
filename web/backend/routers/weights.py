#!/usr/bin/env python3
"""
Weight endpoints - inspect matching weight schemes.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.app_context import AppContext
from database.repository import MatchingRepository
from ..dependencies import get_repository, get_app_context
from ..services.match_service import MatchService
from ..models.responses import WeightsResponse

router = APIRouter(prefix="/api/weights", tags=["weights"])


@router.get("", response_model=WeightsResponse)
def get_weights(
    scheme_id: Optional[str] = Query(default=None, description="Weighting scheme; defaults to the configured one"),
    repo: MatchingRepository = Depends(get_repository),
    context: AppContext = Depends(get_app_context)
):
    """Current weights of a scheme, created with defaults on first access."""
    return MatchService(repo, context).get_weights(scheme_id)
