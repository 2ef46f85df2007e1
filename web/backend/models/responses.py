#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from core.matcher.models import MatchResult, WeightEntry
from core.matcher.weights import WeightSet


class BreakdownItem(BaseModel):
    """Contribution of one factor to the match score."""
    factor: str
    label: str
    score: int
    weight: int
    contribution: float


class MatchMetadataResponse(BaseModel):
    strengths: List[str] = Field(default_factory=list)
    concerns: List[str] = Field(default_factory=list)


class MatchScoreResponse(BaseModel):
    """Scored match between a candidate and a job."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "candidate_id": "c-1",
                "job_id": "j-1",
                "match_score": 72,
                "semantic_score": 90,
                "keyword_score": 70,
                "experience_score": 50,
                "matching_skills": ["Python"],
                "gap_skills": ["Flask"],
                "explanation": "Good match (72%). Solid foundation with 1 matching skills. "
                               "Consider developing Flask to strengthen fit.",
                "breakdown": [
                    {"factor": "semantic", "label": "Semantic Similarity (AI)", "score": 90, "weight": 35, "contribution": 31.5}
                ],
                "metadata": {"strengths": ["Python"], "concerns": ["Flask"]}
            }
        }
    )

    success: bool = True
    candidate_id: str
    job_id: str
    match_score: int = Field(ge=0, le=100)
    # Semantic score is raw cosine * 100 and may dip below zero
    semantic_score: int
    keyword_score: int
    experience_score: int
    matching_skills: List[str]
    gap_skills: List[str]
    explanation: str
    breakdown: List[BreakdownItem]
    metadata: MatchMetadataResponse

    @classmethod
    def from_result(cls, candidate_id: str, job_id: str, result: MatchResult) -> 'MatchScoreResponse':
        return cls(candidate_id=candidate_id, job_id=job_id, **result.to_dict())


class WeightItem(BaseModel):
    factor: str
    weight: int = Field(ge=0, le=100)
    description: str = ""
    active: bool = True


class WeightsResponse(BaseModel):
    """Current weights of a scheme."""
    success: bool = True
    scheme_id: str
    version: int
    weights: List[WeightItem]

    @classmethod
    def build(cls, weight_set: WeightSet, entries: List[WeightEntry]) -> 'WeightsResponse':
        return cls(
            scheme_id=weight_set.scheme_id,
            version=weight_set.version,
            weights=[
                WeightItem(factor=e.factor, weight=e.weight, description=e.description, active=e.active)
                for e in entries
            ]
        )


class FeedbackResponse(WeightsResponse):
    """Weights after applying feedback."""
    adjusted_factors: List[str] = Field(default_factory=list)
    match_id: Optional[str] = None
