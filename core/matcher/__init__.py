"""Matcher Module - Candidate/job match scoring."""
from core.matcher.exceptions import MatchingError, ProviderError, DimensionMismatch
from core.matcher.models import (
    CandidateProfile, JobProfile, EmbeddingRecord, WeightEntry,
    KeywordMatchResult, ScoreBreakdown, MatchMetadata, MatchResult
)
from core.matcher.similarity import cosine_similarity
from core.matcher.keyword_matcher import KeywordMatcher
from core.matcher.experience_scorer import ExperienceScorer
from core.matcher.embedding_store import EmbeddingProvider, EmbeddingStore, InMemoryEmbeddingStore
from core.matcher.weights import WeightStore, WeightSet, InMemoryWeightEntryStore
from core.matcher.service import MatchScorer

__all__ = [
    'MatchScorer', 'EmbeddingProvider', 'EmbeddingStore', 'InMemoryEmbeddingStore',
    'KeywordMatcher', 'ExperienceScorer', 'WeightStore', 'WeightSet',
    'InMemoryWeightEntryStore', 'cosine_similarity',
    'MatchingError', 'ProviderError', 'DimensionMismatch',
    'CandidateProfile', 'JobProfile', 'EmbeddingRecord', 'WeightEntry',
    'KeywordMatchResult', 'ScoreBreakdown', 'MatchMetadata', 'MatchResult'
]
