#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from core.matcher.models import CandidateProfile, JobProfile

Factor = Literal["semantic", "keyword", "experience"]


class CandidateIn(BaseModel):
    """Candidate fields read by the scorer; everything but id is optional."""
    id: str
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    current_role: Optional[str] = None
    experience_text: Optional[str] = Field(None, description="Free text, e.g. '5 years backend'")

    def to_profile(self) -> CandidateProfile:
        return CandidateProfile.from_dict(self.model_dump())


class JobIn(BaseModel):
    """Job fields read by the scorer; everything but id is optional."""
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    required_skills: List[str] = Field(default_factory=list)
    preferred_skills: List[str] = Field(default_factory=list)
    experience_level: Optional[str] = Field(
        None, description="entry, mid, senior, lead or principal"
    )

    def to_profile(self) -> JobProfile:
        return JobProfile.from_dict(self.model_dump())


class ScoreMatchRequest(BaseModel):
    """Request to score one candidate against one job."""
    candidate: CandidateIn
    job: JobIn


class FeedbackRequest(BaseModel):
    """Accept/reject feedback on a match, nudging the listed factors."""
    feedback_type: Literal["accept", "reject"]
    factors: List[Factor] = Field(..., min_length=1)
    scheme_id: Optional[str] = Field(None, description="Weighting scheme; defaults to the configured one")
    match_id: Optional[str] = None
