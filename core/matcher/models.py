#!/usr/bin/env python3
"""
Matcher Models - Data structures for match scoring.

Profiles are what the surrounding application hands to the scorer; every
field except the id is optional and defaults to an empty value. Results are
produced fresh on every scoring call and are never persisted by the scorer.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional

ENTITY_JOB_SEEKER = "job_seeker"
ENTITY_JOB = "job"

FACTOR_SEMANTIC = "semantic"
FACTOR_KEYWORD = "keyword"
FACTOR_EXPERIENCE = "experience"

# Blend order is fixed: breakdown entries are always emitted in this order
FACTORS = (FACTOR_SEMANTIC, FACTOR_KEYWORD, FACTOR_EXPERIENCE)

FACTOR_LABELS = {
    FACTOR_SEMANTIC: "Semantic Similarity (AI)",
    FACTOR_KEYWORD: "Keyword Match",
    FACTOR_EXPERIENCE: "Experience Level",
}


@dataclass
class CandidateProfile:
    """Fields of a job seeker that the scorer reads."""
    id: str
    skills: List[str] = field(default_factory=list)
    bio: Optional[str] = None
    current_role: Optional[str] = None
    experience_text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CandidateProfile':
        return cls(
            id=str(data['id']),
            skills=list(data.get('skills') or []),
            bio=data.get('bio'),
            current_role=data.get('current_role'),
            experience_text=data.get('experience_text'),
        )


@dataclass
class JobProfile:
    """Fields of a job posting that the scorer reads."""
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    required_skills: List[str] = field(default_factory=list)
    preferred_skills: List[str] = field(default_factory=list)
    experience_level: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JobProfile':
        return cls(
            id=str(data['id']),
            title=data.get('title'),
            description=data.get('description'),
            required_skills=list(data.get('required_skills') or []),
            preferred_skills=list(data.get('preferred_skills') or []),
            experience_level=data.get('experience_level'),
        )


@dataclass
class EmbeddingRecord:
    """Cached embedding for one (entity_type, entity_id)."""
    entity_type: str
    entity_id: str
    source_text: str
    vector: List[float]
    model_name: str


@dataclass
class WeightEntry:
    """One factor weight inside a weighting scheme."""
    scheme_id: str
    factor: str
    weight: int
    description: str = ""
    active: bool = True
    id: Optional[Any] = None


@dataclass
class KeywordMatchResult:
    """Skill overlap between a candidate and a job."""
    score: float
    matching: List[str] = field(default_factory=list)
    gaps: List[str] = field(default_factory=list)


@dataclass
class ScoreBreakdown:
    """Contribution of one factor to the blended score."""
    factor: str
    label: str
    score: int
    weight: int
    contribution: float


@dataclass
class MatchMetadata:
    """Closed replacement for the free-form AI metadata bag."""
    strengths: List[str] = field(default_factory=list)
    concerns: List[str] = field(default_factory=list)


@dataclass
class MatchResult:
    """Composite match score for one (candidate, job) pair."""
    match_score: int
    semantic_score: int
    keyword_score: int
    experience_score: int
    matching_skills: List[str] = field(default_factory=list)
    gap_skills: List[str] = field(default_factory=list)
    explanation: str = ""
    breakdown: List[ScoreBreakdown] = field(default_factory=list)
    metadata: MatchMetadata = field(default_factory=MatchMetadata)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
